"""Message entity - one line of the running conversation transcript."""

from dataclasses import dataclass
from enum import Enum

from .language import Language


class Speaker(str, Enum):
    """Who said the line."""

    VENDOR = "VENDOR"
    TOURIST = "TOURIST"


@dataclass(frozen=True)
class Message:
    """A spoken or typed line together with its translation."""

    id: str
    sender: Speaker
    original_text: str
    translated_text: str
    timestamp: float
    original_language: Language
    target_language: Language
    is_from_common_phrase: bool = False
