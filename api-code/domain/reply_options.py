from __future__ import annotations

from enum import Enum


class Language(str, Enum):
    ENGLISH = "English"
    KISWAHILI = "Kiswahili"
    SHENG = "Sheng"


class SarcasmLevel(str, Enum):
    MILD = "Mild"
    MEDIUM = "Medium"
    NUCLEAR = "Nuclear"


MAX_MESSAGE_LENGTH = 280

DEFAULT_LANGUAGE = Language.ENGLISH
DEFAULT_SARCASM_LEVEL = SarcasmLevel.MEDIUM


def allowed_values(enum_cls: type[Enum]) -> tuple[str, ...]:
    return tuple(member.value for member in enum_cls)
