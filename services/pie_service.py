import math
from dataclasses import dataclass

from models.category import Category
from services.category_service import CategoryBreakdown
from utils.constants import PIE_SEGMENTS

START_ANGLE = -math.tau / 4


@dataclass(frozen=True)
class PieSlice:
    category: Category
    color_hex: str
    start_angle: float      # radians
    sweep: float            # radians
    vertices: tuple[tuple[float, float], ...]


def build_pie_slices(
    breakdown: CategoryBreakdown,
    center: tuple[float, float] = (0.0, 0.0),
    radius: float = 1.0,
    segments: int = PIE_SEGMENTS,
) -> list[PieSlice]:
    """Closed polygons for each category, in breakdown order.

    Angles follow a y-down screen frame: the first slice starts at 12 o'clock
    and slices advance clockwise on screen. Each polygon is the center
    followed by segments + 1 points along the arc.
    """
    if breakdown.is_empty or segments < 1:
        return []

    cx, cy = center
    current_angle = START_ANGLE
    slices = []
    for item in breakdown.items:
        sweep = item.total / breakdown.grand_total * math.tau
        vertices = [(cx, cy)]
        for i in range(segments + 1):
            angle = current_angle + (i / segments) * sweep
            vertices.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
        slices.append(PieSlice(
            category=item.category,
            color_hex=item.category.color_hex,
            start_angle=current_angle,
            sweep=sweep,
            vertices=tuple(vertices),
        ))
        current_angle += sweep
    return slices
