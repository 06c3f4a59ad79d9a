"""
Journalist style schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .common import CamelRequest, ORMResponse


class StyleRequest(CamelRequest):
    """Create a style, or update one when ``id`` is given."""

    id: Optional[str] = None
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    tone: Optional[str] = Field(None, max_length=100)
    style_characteristics: Optional[dict] = None
    example_text: Optional[str] = None
    training_text_1: Optional[str] = None
    training_text_2: Optional[str] = None
    training_text_3: Optional[str] = None
    is_default: bool = False


class StyleResponse(ORMResponse):
    id: str
    user_id: str
    name: str
    description: Optional[str] = None
    tone: Optional[str] = None
    style_characteristics: Optional[dict] = None
    example_text: Optional[str] = None
    training_text_1: Optional[str] = None
    training_text_2: Optional[str] = None
    training_text_3: Optional[str] = None
    is_default: bool
    usage_count: int
    created_at: datetime
    updated_at: Optional[datetime] = None


class StyleListResponse(BaseModel):
    styles: List[StyleResponse]


class StyleSaveResponse(BaseModel):
    style: StyleResponse
    success: bool = True
