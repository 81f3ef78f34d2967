"""Reader for the textual grid format.

A grid source is a stream of whitespace-separated tokens:

    <rows> <cols>
    <rows * cols boolean tokens in row-major order>

for example:

    3 3
    false true  false
    false true  false
    false true  false

Boolean tokens are ``true``/``false`` in any case, or ``1``/``0``. Anything
after the last cell is ignored.
"""

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, TextIO, Union

from life_communities.errors import InvalidDimensions, MalformedInput, TruncatedInput
from life_communities.models.grid_state import GridSnapshot

TRUE_TOKENS = frozenset({"true", "1"})
FALSE_TOKENS = frozenset({"false", "0"})


@dataclass
class GridSource:
    """Dimensions and flat row-major cells read from a grid source."""

    rows: int
    cols: int
    cells: List[bool]

    @property
    def alive_count(self) -> int:
        return sum(self.cells)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], name: str) -> int:
    token = next(tokens, None)
    if token is None:
        raise TruncatedInput(f"Missing {name} in grid header")
    try:
        return int(token)
    except ValueError:
        raise MalformedInput(f"Expected an integer for {name}, got {token!r}") from None


def parse_boolean(token: str) -> bool:
    """
    Parse one cell token.

    Args:
        token: Raw token text.

    Returns:
        True for an alive cell, False for a dead one.

    Raises:
        MalformedInput: If the token is not a recognised boolean.
    """
    lowered = token.lower()
    if lowered in TRUE_TOKENS:
        return True
    if lowered in FALSE_TOKENS:
        return False
    raise MalformedInput(f"Expected true or false, got {token!r}")


def read_grid(source: Union[str, TextIO]) -> GridSource:
    """
    Read a grid from text or an open text stream.

    Args:
        source: Grid text, or a file-like object yielding lines.

    Returns:
        GridSource with validated dimensions and exactly rows * cols cells.

    Raises:
        InvalidDimensions: If rows or cols is not positive.
        TruncatedInput: If the header or some cells are missing.
        MalformedInput: If a token cannot be parsed.
    """
    stream = io.StringIO(source) if isinstance(source, str) else source
    tokens = _tokens(stream)

    rows = _read_int(tokens, "row count")
    cols = _read_int(tokens, "column count")
    if rows <= 0 or cols <= 0:
        raise InvalidDimensions(f"Grid dimensions must be positive, got {rows}x{cols}")

    expected = rows * cols
    cells: List[bool] = []
    for token in tokens:
        cells.append(parse_boolean(token))
        if len(cells) == expected:
            break

    if len(cells) < expected:
        raise TruncatedInput(
            f"Expected {expected} cells for a {rows}x{cols} grid, found {len(cells)}"
        )
    return GridSource(rows, cols, cells)


def read_grid_file(path: Union[str, Path]) -> GridSource:
    """Read a grid from a file on disk."""
    with open(path, "r", encoding="utf-8") as stream:
        return read_grid(stream)


def write_grid(snapshot: GridSnapshot) -> str:
    """
    Format a grid in the source format, one line per row.

    The output can be read back with ``read_grid``.
    """
    lines = [f"{snapshot.rows} {snapshot.cols}"]
    for row in snapshot.to_lists():
        lines.append(" ".join("true" if cell else "false" for cell in row))
    return "\n".join(lines) + "\n"
