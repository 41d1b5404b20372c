"""
Errors raised by the slide puzzle core.

Blocked moves are not errors; the resolver reports them as a False result.
"""


class PuzzleError(Exception):
    """Base class for all puzzle errors."""


class OutOfBoundsError(PuzzleError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"Position ({x}, {y}) is outside the {width}x{height} board")
        self.x = x
        self.y = y


class InvalidConfigurationError(PuzzleError, ValueError):
    """Requested generation counts do not fit the board."""
