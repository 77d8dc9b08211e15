"""Fixed catalog of translation target languages."""

from enum import Enum

from lingochat.core.exceptions import UnsupportedLanguageError


class TargetLanguage(str, Enum):
    ENGLISH = "en"
    PORTUGUESE = "pt"
    SPANISH = "es"
    RUSSIAN = "ru"
    TURKISH = "tr"
    FRENCH = "fr"

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    @classmethod
    def from_code(cls, code: str) -> "TargetLanguage":
        """Resolve a language code, raising UnsupportedLanguageError if unknown."""
        try:
            return cls(code.strip().lower())
        except ValueError as e:
            raise UnsupportedLanguageError(code) from e


DEFAULT_TARGET_LANGUAGE = TargetLanguage.ENGLISH
