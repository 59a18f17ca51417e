"""
Board geometry helpers (lasso selection).
"""

from .lasso import Point, Bounds, BoardShape, point_in_polygon, select_shapes_in_lasso, union_bounds

__all__ = [
    'Point',
    'Bounds',
    'BoardShape',
    'point_in_polygon',
    'select_shapes_in_lasso',
    'union_bounds',
]
