"""
Math Text API Routes

Thin JSON handlers over core.mathtext, used by the tutor chat renderer and
the math input field.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from config.settings import settings
from core.mathtext import (
    detect_math_segments,
    extract_variables,
    from_latex,
    graphable_equations,
    has_math,
    is_latex,
    is_math_expression,
    merge_segments,
    normalize_latex,
    split_delimited_math,
    to_latex,
)

logger = logging.getLogger(__name__)


# =========================================
# Pydantic Models
# =========================================

class SegmentModel(BaseModel):
    """A text or math span"""
    type: str
    content: str


class SegmentsRequest(BaseModel):
    text: str = Field(..., description="Free-form text to scan for math")
    merge: Optional[bool] = Field(None, description="Merge adjacent same-type segments (default from settings)")


class SegmentsResponse(BaseModel):
    segments: List[SegmentModel]
    has_math: bool


class ClassifyRequest(BaseModel):
    text: str = Field(..., description="Standalone string to classify")


class ClassifyResponse(BaseModel):
    text: str
    is_math: bool


class PlainRequest(BaseModel):
    text: str = Field(..., description="Plain math notation, e.g. sqrt(x)/2")


class LatexResponse(BaseModel):
    latex: str
    is_latex: bool


class LatexRequest(BaseModel):
    latex: str = Field(..., description="LaTeX source")


class PlainResponse(BaseModel):
    plain: str


class NormalizeResponse(BaseModel):
    latex: str


class DelimitedRequest(BaseModel):
    content: str = Field(..., description="Chat content with $...$ / $$...$$ math")


class DelimitedPartModel(BaseModel):
    kind: str
    content: str
    raw: str


class DelimitedResponse(BaseModel):
    parts: List[DelimitedPartModel]


class VariablesRequest(BaseModel):
    lines: List[str] = Field(default_factory=list, description="Editor lines in document order")


class VariableModel(BaseModel):
    symbol: str
    description: str
    color: Optional[str] = None


class VariablesResponse(BaseModel):
    variables: List[VariableModel]
    graphable: List[str]


def check_text_length(*texts: str) -> None:
    """Reject payloads longer than settings.max_text_length"""
    total = sum(len(t) for t in texts)
    if total > settings.max_text_length:
        logger.warning(f"Rejected payload of {total} chars (limit {settings.max_text_length})")
        raise HTTPException(
            status_code=413,
            detail=f"Text too long: {total} characters (limit {settings.max_text_length})"
        )


# =========================================
# Router
# =========================================

router = APIRouter(prefix="/api/math", tags=["Math Text"])


@router.post("/segments", response_model=SegmentsResponse)
async def segments(request: SegmentsRequest):
    """Split text into text and math segments"""
    check_text_length(request.text)

    result = detect_math_segments(request.text)
    merge = settings.merge_segments if request.merge is None else request.merge
    if merge:
        result = merge_segments(result)

    logger.info(f"Segmented {len(request.text)} chars into {len(result)} segments")
    return SegmentsResponse(
        segments=[SegmentModel(**s.to_dict()) for s in result],
        has_math=has_math(result),
    )


@router.post("/classify", response_model=ClassifyResponse)
async def classify(request: ClassifyRequest):
    """Check whether a standalone string is a math expression"""
    check_text_length(request.text)
    return ClassifyResponse(text=request.text, is_math=is_math_expression(request.text))


@router.post("/latex", response_model=LatexResponse)
async def plain_to_latex(request: PlainRequest):
    """Convert plain math notation to LaTeX"""
    check_text_length(request.text)
    latex = to_latex(request.text)
    return LatexResponse(latex=latex, is_latex=is_latex(latex))


@router.post("/plain", response_model=PlainResponse)
async def latex_to_plain(request: LatexRequest):
    """Convert LaTeX back to plain notation for editing"""
    check_text_length(request.latex)
    return PlainResponse(plain=from_latex(request.latex))


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize(request: LatexRequest):
    """Normalize LaTeX whitespace for storage"""
    check_text_length(request.latex)
    return NormalizeResponse(latex=normalize_latex(request.latex))


@router.post("/delimited", response_model=DelimitedResponse)
async def delimited(request: DelimitedRequest):
    """Split chat content on $...$ and $$...$$ delimiters"""
    check_text_length(request.content)
    parts = split_delimited_math(request.content)
    return DelimitedResponse(parts=[DelimitedPartModel(**p.to_dict()) for p in parts])


@router.post("/variables", response_model=VariablesResponse)
async def variables(request: VariablesRequest):
    """Variables and graphable equations of an editor document"""
    check_text_length(*request.lines)
    found = extract_variables(request.lines, limit=settings.math_max_variables)
    return VariablesResponse(
        variables=[VariableModel(**v.to_dict()) for v in found],
        graphable=graphable_equations(request.lines),
    )
