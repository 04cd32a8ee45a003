"""
CAESAR TOOLKIT - Error types raised by the cipher core.
"""


class InvalidArgumentError(ValueError):
    """Malformed or missing argument (empty text, bad shift, unknown mode)."""


class UnsupportedLanguageError(InvalidArgumentError):
    """Language id has no statistics profile."""

    def __init__(self, language_id: str):
        self.language_id = language_id
        super().__init__(f"Language '{language_id}' not supported")
