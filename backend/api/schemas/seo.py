"""
SEO project, knowledge and article schemas.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from .common import CamelRequest, ORMResponse


class ProjectCreateRequest(CamelRequest):
    name: str = Field(..., min_length=1, max_length=255)
    domain: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    industry: Optional[str] = Field(None, max_length=100)
    target_audience: Optional[str] = None
    brand_tone: Optional[str] = Field(None, max_length=100)
    primary_language: str = Field(default="en", max_length=10)
    project_type: str = Field(default="blog", max_length=50)


class ProjectResponse(ORMResponse):
    id: str
    user_id: str
    name: str
    domain: Optional[str] = None
    description: Optional[str] = None
    industry: Optional[str] = None
    target_audience: Optional[str] = None
    brand_tone: Optional[str] = None
    primary_language: str
    project_type: str
    created_at: datetime


class ProjectListResponse(BaseModel):
    projects: List[ProjectResponse]


class ProjectSaveResponse(BaseModel):
    project: ProjectResponse


class KnowledgeCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    content: str = Field(..., min_length=1)


class KnowledgeResponse(ORMResponse):
    id: str
    project_id: str
    title: str
    content: str
    created_at: datetime


class KnowledgeListResponse(BaseModel):
    knowledge: List[KnowledgeResponse]


class KnowledgeSaveResponse(BaseModel):
    entry: KnowledgeResponse


class SEOArticleGenerateRequest(CamelRequest):
    project_id: str
    target_keyword: str = Field(..., min_length=1, max_length=255)
    language: str = Field(default="en", max_length=10)
    include_images: bool = True
    include_faq: bool = True
    include_toc: bool = True
    word_count: int = Field(default=1500, ge=100, le=10000)
    tone: Literal["professional", "casual", "technical", "friendly"] = "professional"


class QualityCheckResponse(ORMResponse):
    id: str
    plagiarism_score: float
    grammar_errors: int
    readability_score: float
    seo_score: float
    e_e_a_t_score: float
    passed: bool


class SEOArticleResponse(ORMResponse):
    id: str
    project_id: str
    title: str
    slug: str
    content: str
    content_html: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    language: str
    keywords: Optional[List[str]] = None
    target_keyword: str
    word_count: int
    reading_time: Optional[str] = None
    has_table_of_contents: bool
    has_faq: bool
    internal_links_count: int
    external_links_count: int
    images_count: int
    status: str
    ai_model: Optional[str] = None
    created_at: datetime


class SEOArticleListResponse(BaseModel):
    articles: List[SEOArticleResponse]


class SEOArticleGenerateResponse(BaseModel):
    article: SEOArticleResponse
    qualityCheck: Optional[QualityCheckResponse] = None
