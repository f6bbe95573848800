"""Translation errors."""

from __future__ import annotations


class TranspileError(Exception):
    """Base class for failures turning a command list into Rickroll text."""

    pass


class UnbalancedBracketsError(TranspileError):
    """Raised when block closes do not pair with block opens.

    ``index`` is the position of a close command found at depth 0, or
    ``None`` when the list ended with ``depth`` blocks still open.
    """

    def __init__(self, index: int | None = None, depth: int = 0):
        self.index = index
        self.depth = depth
        if index is not None:
            message = f"Block close at command {index} has no matching open"
        else:
            message = f"{depth} block(s) left open at end of program"
        super().__init__(message)


class SourceReadError(TranspileError):
    """Raised when a Brainfuck file cannot be read or is not valid text."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f'Unable to read file "{path}"')
