from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import pandas as pd

from screen_compare.utils.typing import DerivedScreen

RESULT_COLUMNS = ["Screen", "Color", "Diagonal (in)", "Width (in)", "Height (in)", "Area (sq in)"]

def screen_label(position: int) -> str:
    return f"Screen {position + 1}"

def results_frame(results: Sequence[DerivedScreen]) -> pd.DataFrame:
    """Table of derived screens, rounded for display."""
    rows = [
        {
            "Screen": screen_label(i),
            "Color": r.color,
            "Diagonal (in)": round(r.diagonal, 1),
            "Width (in)": round(r.width, 2),
            "Height (in)": round(r.height, 2),
            "Area (sq in)": round(r.area, 2),
        }
        for i, r in enumerate(results)
    ]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)

@dataclass(frozen=True)
class Rectangle:
    label: str
    color: str
    width_px: float
    height_px: float

def comparison_rectangles(results: Sequence[DerivedScreen], scale_factor: float) -> List[Rectangle]:
    """Rectangles for the visual overlay, all anchored at the bottom-left corner."""
    return [
        Rectangle(screen_label(i), r.color, r.width * scale_factor, r.height * scale_factor)
        for i, r in enumerate(results)
    ]

def summary(results: Sequence[DerivedScreen]) -> Dict[str, object]:
    """Largest screen and each screen's area relative to the smallest one."""
    if not results:
        return {"largest": None, "relative_area": {}}
    areas = [r.area for r in results]
    smallest = min(areas)
    largest_index = max(range(len(results)), key=lambda i: areas[i])
    relative: Dict[str, Optional[float]] = {
        screen_label(i): (area / smallest if smallest > 0 else None)
        for i, area in enumerate(areas)
    }
    return {"largest": screen_label(largest_index), "relative_area": relative}
