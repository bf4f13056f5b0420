from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse


PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>EehSawa AI</title>
    <style>
      body { margin: 0; font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, sans-serif; background: #f6f3ee; color: #1f1d1a; }
      .wrap { max-width: 640px; margin: 0 auto; padding: 48px 20px; }
      h1 { margin: 0; font-size: 40px; text-align: center; }
      .sub { margin: 6px 0 28px; text-align: center; color: #6b655c; }
      .card { background: #fff; border-radius: 12px; padding: 24px; box-shadow: 0 10px 30px rgba(0, 0, 0, 0.06); }
      textarea { width: 100%; min-height: 100px; box-sizing: border-box; font: inherit; padding: 10px; resize: none; }
      fieldset { border: 0; padding: 0; margin: 18px 0 0; }
      legend { font-weight: 600; margin-bottom: 6px; }
      .error { color: #b42318; font-size: 14px; min-height: 18px; }
      button { font: inherit; padding: 10px 16px; border-radius: 8px; border: 0; background: #1f1d1a; color: #fff; cursor: pointer; }
      button:disabled { opacity: 0.5; cursor: wait; }
      #reply-card { display: none; margin-top: 20px; }
      #reply { white-space: pre-wrap; }
    </style>
  </head>
  <body>
    <div class="wrap">
      <h1>EehSawa AI</h1>
      <p class="sub">Your friendly neighborhood sarcastic AI.</p>
      <div class="card">
        <form id="reply-form">
          <label for="message"><strong>Your Message</strong></label>
          <textarea id="message" name="message" placeholder="Tell the AI what's on your mind..."></textarea>
          <div class="error" id="error-message"></div>
          <fieldset id="language"><legend>Language</legend></fieldset>
          <div class="error" id="error-language"></div>
          <fieldset id="sarcasmLevel"><legend>Sarcasm Level</legend></fieldset>
          <div class="error" id="error-sarcasmLevel"></div>
          <button type="submit" id="submit">Get Sarcastic Reply</button>
          <div class="error" id="error-general"></div>
        </form>
      </div>
      <div class="card" id="reply-card">
        <p id="reply"></p>
        <button type="button" id="copy">Copy</button>
      </div>
    </div>
    <script>
      const form = document.getElementById("reply-form");
      const submit = document.getElementById("submit");
      const replyCard = document.getElementById("reply-card");
      const replyText = document.getElementById("reply");

      function radios(field, values, selected) {
        const group = document.getElementById(field);
        for (const value of values) {
          const label = document.createElement("label");
          const input = document.createElement("input");
          input.type = "radio";
          input.name = field;
          input.value = value;
          input.checked = value === selected;
          label.append(input, " " + value);
          group.append(label, document.createElement("br"));
        }
      }

      function clearErrors() {
        for (const node of document.querySelectorAll(".error")) node.textContent = "";
      }

      fetch("/api/v1/reply/options")
        .then((res) => res.json())
        .then((options) => {
          radios("language", options.languages, options.defaultLanguage);
          radios("sarcasmLevel", options.sarcasmLevels, options.defaultSarcasmLevel);
          document.getElementById("message").maxLength = options.maxMessageLength;
        });

      form.addEventListener("submit", async (event) => {
        event.preventDefault();
        clearErrors();
        replyCard.style.display = "none";
        submit.disabled = true;
        const data = new FormData(form);
        const payload = {
          message: data.get("message") || "",
          language: data.get("language"),
          sarcasmLevel: data.get("sarcasmLevel"),
        };
        try {
          const res = await fetch("/api/v1/reply", {
            method: "POST",
            headers: { "Content-Type": "application/json" },
            body: JSON.stringify(payload),
          });
          const body = await res.json();
          if (res.ok) {
            replyText.textContent = body.reply;
            replyCard.style.display = "block";
          } else if (res.status === 422 && body.detail && body.detail.errors) {
            for (const [field, message] of Object.entries(body.detail.errors)) {
              const slot = document.getElementById("error-" + field) || document.getElementById("error-general");
              slot.textContent = field + " " + message;
            }
          } else {
            document.getElementById("error-general").textContent = body.detail || "Something went wrong.";
          }
        } catch (err) {
          document.getElementById("error-general").textContent = "Something went wrong. Please try again later.";
        } finally {
          submit.disabled = false;
        }
      });

      document.getElementById("copy").addEventListener("click", () => {
        if (replyText.textContent) navigator.clipboard.writeText(replyText.textContent);
      });
    </script>
  </body>
</html>
"""


def build_page_router() -> APIRouter:
    router = APIRouter()

    @router.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def index() -> str:
        return PAGE_HTML

    return router
