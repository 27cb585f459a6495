"""
Application Errors

All failures raised by the game engine, the word list loader and the CLI.
Each error carries a short kind name that prefixes its message.
"""


class AppError(Exception):
    """Base class for every error the game reports to its callers."""

    kind = "AppError"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"[{self.kind}] {detail}")


class NoWordsError(AppError):
    """The word list is empty or no word could be picked from it."""

    kind = "NoWords"

    def __init__(self):
        super().__init__("No words found in file.")


class InvalidCharsetError(AppError):
    """The word list asset is not valid UTF-8."""

    kind = "InvalidCharset"

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"The Words file ('{path}') contains invalid UTF-8 characters")


class InputReadError(AppError):
    """The input stream feeding the CLI failed or was closed."""

    kind = "StdIoRead"

    def __init__(self):
        super().__init__("Failed to read stdio.")


class InvalidGuessLengthError(AppError):
    """
    The guess does not have as many characters as the target word.

    This is the only recoverable error: the session is left untouched,
    so callers can prompt again.
    """

    kind = "InvalidGuessLength"

    def __init__(self, expected: int):
        self.expected = expected
        super().__init__(f"Your guess word must be {expected} letters long.")
