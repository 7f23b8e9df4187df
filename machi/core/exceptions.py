"""Typed exceptions for hand analysis.

Input problems (bad shape, bad notation, bad pool bookkeeping) and
internal inconsistencies are kept apart so a host application can tell a
user error from a bug in the analyzer.
"""


class AnalysisError(Exception):
    """Base exception for everything the analyzer reports."""


class InvalidHandError(AnalysisError, ValueError):
    """Hand shape or tile values are invalid (raised before any search)."""


class NotationError(InvalidHandError):
    """Hand notation could not be parsed.

    Attributes:
        index: Character position in the input where parsing failed.
    """

    def __init__(self, message: str, index: int = -1) -> None:
        self.index = index
        super().__init__(message)


class PoolError(AnalysisError):
    """Tile pool got an out-of-range tile or went outside 0..TILE_COPIES."""


class InvariantViolationError(AnalysisError):
    """The evaluators and the decomposition search disagree.

    Never caused by user input; a valid hand reaching this is a bug.
    """
