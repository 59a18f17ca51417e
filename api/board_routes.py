"""
Board API Routes

Lasso selection over the shapes of a whiteboard page.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from config.constants import LASSO_MAX_POINTS, LASSO_MAX_SHAPES
from config.settings import settings
from core.board import BoardShape, Bounds, Point, select_shapes_in_lasso, union_bounds

logger = logging.getLogger(__name__)


class PointModel(BaseModel):
    x: float
    y: float


class BoundsModel(BaseModel):
    x: float
    y: float
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)


class ShapeModel(BaseModel):
    id: str
    type: str = Field(..., description="Shape type, e.g. draw, image, text")
    bounds: BoundsModel
    ai_generated: bool = False


class LassoRequest(BaseModel):
    points: List[PointModel] = Field(..., max_length=LASSO_MAX_POINTS, description="Lasso path as drawn")
    shapes: List[ShapeModel] = Field(default_factory=list, max_length=LASSO_MAX_SHAPES)


class LassoResponse(BaseModel):
    shape_ids: List[str]
    bounds: Optional[BoundsModel] = None


router = APIRouter(prefix="/api/board", tags=["Board"])


@router.post("/lasso", response_model=LassoResponse)
async def lasso(request: LassoRequest):
    """Select the shapes enclosed by a lasso and return their combined bounds"""
    shapes = [
        BoardShape(
            id=s.id,
            type=s.type,
            bounds=Bounds(s.bounds.x, s.bounds.y, s.bounds.width, s.bounds.height),
            ai_generated=s.ai_generated,
        )
        for s in request.shapes
    ]
    points = [Point(p.x, p.y) for p in request.points]

    selected_ids = select_shapes_in_lasso(
        points,
        shapes,
        min_points=settings.lasso_min_points,
        selectable_types=settings.lasso_selectable_types,
    )
    selected = set(selected_ids)
    bounds = union_bounds(s for s in shapes if s.id in selected)

    logger.info(f"Lasso with {len(points)} points selected {len(selected_ids)}/{len(shapes)} shapes")
    return LassoResponse(
        shape_ids=selected_ids,
        bounds=BoundsModel(**bounds.to_dict()) if bounds else None,
    )
