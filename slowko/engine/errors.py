"""
Engine Errors

Local validation failures raised by the engine. None of them is transient;
the caller must re-invoke with corrected input.
"""


class EngineError(ValueError):
    """Base class for guess and board validation failures."""


class LengthMismatch(EngineError):
    """Guess, solution and word length disagree."""

    def __init__(self, expected: int, actual: int, what: str = "guess"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {what} of {expected} letters, got {actual}")


class InvalidCharacter(EngineError):
    """Guess contains a character outside the supported alphabet."""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Character '{character}' at position {position} is not a Polish letter")
