from __future__ import annotations

import textwrap

from schemas import ReplyRequest


REPLY_PROMPT_TEMPLATE = textwrap.dedent(
    """\
    You are a sarcastic AI assistant. Generate a sarcastic reply to the following message in the specified language and sarcasm level.

    Language: {language}
    Sarcasm Level: {sarcasm_level}
    Message: {message}

    Reply:"""  # no trailing space after "Reply:"
)


def build_reply_prompt(request: ReplyRequest) -> str:
    # values are substituted unescaped
    return REPLY_PROMPT_TEMPLATE.format(
        language=request.language.value,
        sarcasm_level=request.sarcasm_level.value,
        message=request.message,
    )
