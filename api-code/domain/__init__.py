from .errors import GenerationError, ValidationError
from .reply_options import (
    DEFAULT_LANGUAGE,
    DEFAULT_SARCASM_LEVEL,
    MAX_MESSAGE_LENGTH,
    Language,
    SarcasmLevel,
    allowed_values,
)

__all__ = [
    "GenerationError",
    "ValidationError",
    "DEFAULT_LANGUAGE",
    "DEFAULT_SARCASM_LEVEL",
    "MAX_MESSAGE_LENGTH",
    "Language",
    "SarcasmLevel",
    "allowed_values",
]
