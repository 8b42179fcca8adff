from typing import Tuple

PALETTE: Tuple[str, ...] = (
    "#ef4444",  # red
    "#3b82f6",  # blue
    "#10b981",  # green
    "#f59e0b",  # amber
    "#8b5cf6",  # violet
    "#ec4899",  # pink
    "#14b8a6",  # teal
    "#f97316",  # orange
    "#6366f1",  # indigo
    "#84cc16",  # lime
)

def color_for_index(index: int) -> str:
    """Palette color for the entry created at 0-based position `index`."""
    if index < 0:
        raise ValueError(f"Color index must be >= 0, got {index}")
    return PALETTE[index % len(PALETTE)]
