"""
Lasso Selection

Geometry behind the whiteboard "lasso solve" tool: given the points of a
freehand lasso and the shapes on the page, decide which shapes the lasso
encloses. A shape is selected when its center or any of its corners lies
inside the closed lasso polygon.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from config.constants import LASSO_MIN_POINTS, LASSO_SELECTABLE_TYPES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned box"""
    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def corners(self) -> List[Point]:
        return [
            Point(self.x, self.y),
            Point(self.max_x, self.y),
            Point(self.x, self.max_y),
            Point(self.max_x, self.max_y),
        ]

    def collides(self, other: 'Bounds') -> bool:
        """True when the boxes overlap or touch"""
        return not (
            self.max_x < other.x or self.x > other.max_x
            or self.max_y < other.y or self.y > other.max_y
        )

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> 'Bounds':
        min_x = min(p.x for p in points)
        min_y = min(p.y for p in points)
        max_x = max(p.x for p in points)
        max_y = max(p.y for p in points)
        return cls(min_x, min_y, max_x - min_x, max_y - min_y)

    def to_dict(self) -> dict:
        return {'x': self.x, 'y': self.y, 'width': self.width, 'height': self.height}


@dataclass
class BoardShape:
    """A shape on the board page"""
    id: str
    type: str
    bounds: Bounds
    ai_generated: bool = False


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Ray casting (even-odd) test"""
    inside = False
    n = len(polygon)
    j = n - 1

    for i in range(n):
        xi, yi = polygon[i].x, polygon[i].y
        xj, yj = polygon[j].x, polygon[j].y
        # The first condition guarantees yj != yi
        if (yi > point.y) != (yj > point.y) and \
                point.x < (xj - xi) * (point.y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i

    return inside


def close_lasso(points: Sequence[Point]) -> List[Point]:
    """Return the lasso path with the first point repeated at the end"""
    closed = list(points)
    if closed and closed[-1] != closed[0]:
        closed.append(closed[0])
    return closed


def select_shapes_in_lasso(
    points: Sequence[Point],
    shapes: Iterable[BoardShape],
    min_points: int = LASSO_MIN_POINTS,
    selectable_types: Iterable[str] = LASSO_SELECTABLE_TYPES,
) -> List[str]:
    """
    Find shapes enclosed by a lasso

    Args:
        points: Lasso path as drawn
        shapes: Shapes on the page, in rendering order
        min_points: Paths with fewer points select nothing
        selectable_types: Shape types the lasso can pick up

    Returns:
        IDs of selected shapes, in input order
    """
    if not points or len(points) < min_points:
        logger.debug("Lasso ignored: %d point(s)", len(points))
        return []

    polygon = close_lasso(points)
    lasso_bounds = Bounds.from_points(polygon)
    selectable = set(selectable_types)
    selected = []

    for shape in shapes:
        # Only user drawings and images; AI output is never re-solved
        if shape.type not in selectable or shape.ai_generated:
            continue
        if not lasso_bounds.collides(shape.bounds):
            continue

        probes = [shape.bounds.center] + shape.bounds.corners
        if any(point_in_polygon(probe, polygon) for probe in probes):
            selected.append(shape.id)

    logger.debug("Lasso selected %d shape(s)", len(selected))
    return selected


def union_bounds(shapes: Iterable[BoardShape]) -> Optional[Bounds]:
    """Bounding box of all shapes, or None when there are none"""
    boxes = [shape.bounds for shape in shapes]
    if not boxes:
        return None

    min_x = min(b.x for b in boxes)
    min_y = min(b.y for b in boxes)
    max_x = max(b.max_x for b in boxes)
    max_y = max(b.max_y for b in boxes)
    return Bounds(min_x, min_y, max_x - min_x, max_y - min_y)
