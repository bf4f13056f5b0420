from .reply_prompt import REPLY_PROMPT_TEMPLATE, build_reply_prompt
from .reply_service import SarcasticReplyService
from .reply_validator import validate_reply_input
from .text_generation import GeminiTextGenerator, TextGenerator

__all__ = [
    "REPLY_PROMPT_TEMPLATE",
    "build_reply_prompt",
    "SarcasticReplyService",
    "validate_reply_input",
    "GeminiTextGenerator",
    "TextGenerator",
]
