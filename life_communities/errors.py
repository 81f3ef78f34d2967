"""Error types raised while building and querying a grid."""


class GridError(Exception):
    """Base class for all grid errors."""


class InvalidDimensions(GridError, ValueError):
    """Rows or columns are not positive."""


class TruncatedInput(GridError, ValueError):
    """The source ended before every cell was read."""


class MalformedInput(GridError, ValueError):
    """A token in the source could not be understood."""


class IndexOutOfRange(GridError, IndexError):
    """A coordinate lies outside the grid."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(
            f"Cell ({row}, {col}) is out of range for a {rows}x{cols} grid"
        )
        self.row = row
        self.col = col
