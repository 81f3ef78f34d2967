"""Plain-text rendering of a grid generation."""

from life_communities.config import ALIVE_CHAR, DEAD_CHAR
from life_communities.models.grid_state import GridSnapshot


def render_text(
    snapshot: GridSnapshot, alive: str = ALIVE_CHAR, dead: str = DEAD_CHAR
) -> str:
    """Draw the grid as one line of characters per row."""
    return "\n".join(
        "".join(alive if cell else dead for cell in row) for row in snapshot.to_lists()
    )


def render_summary(snapshot: GridSnapshot, communities: int) -> str:
    """One-line description of a generation."""
    status = "alive" if snapshot.alive_count else "extinct"
    return (
        f"Generation {snapshot.generation}: {snapshot.alive_count} live cells, "
        f"{communities} communities ({status})"
    )
