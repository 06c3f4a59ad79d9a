"""
SEO project API routes: projects, brand knowledge and AI-generated,
quality-checked articles.
"""

import logging
from typing import List

import markdown
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_current_user
from api.middleware.rate_limit import get_rate_limit, limiter
from api.schemas.seo import (
    KnowledgeCreateRequest,
    KnowledgeListResponse,
    KnowledgeSaveResponse,
    ProjectCreateRequest,
    ProjectListResponse,
    ProjectSaveResponse,
    SEOArticleGenerateRequest,
    SEOArticleGenerateResponse,
    SEOArticleListResponse,
)
from adapters.ai import sanitize_prompt_input
from core.ai_router import TaskType
from infrastructure.database.connection import get_db
from infrastructure.database.models import (
    KnowledgeEntry,
    QualityCheck,
    SEOArticle,
    SEOArticleStatus,
    SEOProject,
    User,
)
from services import AIService, get_ai_service
from services.content_metrics import (
    count_markers,
    extract_meta_description,
    extract_title,
    reading_time_minutes,
    run_quality_check,
    slugify,
    word_count,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seo", tags=["SEO"])

SEO_ARTICLE_MAX_TOKENS = 4000


async def _get_own_project(db: AsyncSession, project_id: str, user: User) -> SEOProject:
    result = await db.execute(
        select(SEOProject).where(
            SEOProject.id == project_id,
            SEOProject.user_id == user.id,
        )
    )
    project = result.scalar_one_or_none()
    if not project:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Project not found",
        )
    return project


def build_seo_article_prompt(
    project: SEOProject,
    knowledge: List[KnowledgeEntry],
    body: SEOArticleGenerateRequest,
) -> str:
    keyword = sanitize_prompt_input(body.target_keyword, 200)
    audience = sanitize_prompt_input(project.target_audience, 500) or "general readers"
    industry = sanitize_prompt_input(project.industry, 100) or "general"
    knowledge_context = "\n\n".join(f"{k.title}: {k.content}" for k in knowledge)
    structure = "a Table of Contents" if body.include_toc else "clear headings"
    ending = "Include a FAQ section at the end" if body.include_faq else "End with a strong conclusion"
    images = (
        "Suggest 3-5 image placements with descriptions (mark with [IMAGE: description])"
        if body.include_images
        else ""
    )

    return f"""You are an expert SEO content writer. Generate a complete, SEO-optimized article in {body.language} language.

TARGET KEYWORD: {keyword}
TONE: {sanitize_prompt_input(body.tone or project.brand_tone, 50) or 'professional'}
WORD COUNT: {body.word_count} words
INDUSTRY: {industry}
TARGET AUDIENCE: {audience}

BRAND KNOWLEDGE:
{knowledge_context}

REQUIREMENTS:
- Write naturally, sound human (not AI-detectable)
- Follow E-E-A-T principles (Expertise, Experience, Authoritativeness, Trustworthiness)
- Include {structure}
- {ending}
- Use the target keyword naturally 5-8 times
- Include LSI keywords and semantic variations
- Structure with H2 and H3 headings
- Add internal linking opportunities (mark with [INTERNAL_LINK: topic])
- Add external linking opportunities to authoritative sources (mark with [EXTERNAL_LINK: source])
- {images}
- Ensure 100% unique content
- Make it scannable with bullet points and short paragraphs

Generate the complete article now:"""


@router.get("/projects", response_model=ProjectListResponse)
async def list_projects(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    List the user's SEO projects, newest first.
    """
    result = await db.execute(
        select(SEOProject)
        .where(SEOProject.user_id == current_user.id)
        .order_by(SEOProject.created_at.desc())
    )
    return {"projects": result.scalars().all()}


@router.post("/projects", response_model=ProjectSaveResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    body: ProjectCreateRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Create an SEO project.
    """
    project = SEOProject(user_id=current_user.id, **body.model_dump())
    db.add(project)
    await db.commit()
    await db.refresh(project)

    logger.info("Created SEO project %s for user %s", project.id, current_user.id)
    return {"project": project}


@router.get("/projects/{project_id}/articles", response_model=SEOArticleListResponse)
async def list_project_articles(
    project_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    List a project's SEO articles, newest first.
    """
    project = await _get_own_project(db, project_id, current_user)

    result = await db.execute(
        select(SEOArticle)
        .where(SEOArticle.project_id == project.id)
        .order_by(SEOArticle.created_at.desc())
    )
    return {"articles": result.scalars().all()}


@router.get("/projects/{project_id}/knowledge", response_model=KnowledgeListResponse)
async def list_knowledge(
    project_id: str,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    List a project's brand knowledge entries.
    """
    project = await _get_own_project(db, project_id, current_user)

    result = await db.execute(
        select(KnowledgeEntry)
        .where(KnowledgeEntry.project_id == project.id)
        .order_by(KnowledgeEntry.created_at)
    )
    return {"knowledge": result.scalars().all()}


@router.post(
    "/projects/{project_id}/knowledge",
    response_model=KnowledgeSaveResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_knowledge(
    project_id: str,
    body: KnowledgeCreateRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """
    Add a brand knowledge entry used as context when generating articles.
    """
    project = await _get_own_project(db, project_id, current_user)

    entry = KnowledgeEntry(project_id=project.id, title=body.title, content=body.content)
    db.add(entry)
    await db.commit()
    await db.refresh(entry)
    return {"entry": entry}


@router.post("/articles/generate", response_model=SEOArticleGenerateResponse)
@limiter.limit(get_rate_limit("generation"))
async def generate_article(
    request: Request,
    body: SEOArticleGenerateRequest,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    ai_service: AIService = Depends(get_ai_service),
):
    """
    Generate an SEO article for a project and run the quality check on it.

    The article is stored with status ``review``.
    """
    project = await _get_own_project(db, body.project_id, current_user)

    knowledge_result = await db.execute(
        select(KnowledgeEntry)
        .where(KnowledgeEntry.project_id == project.id)
        .order_by(KnowledgeEntry.created_at)
    )
    knowledge = list(knowledge_result.scalars().all())

    generated = await ai_service.generate_for_task(
        TaskType.SEO_ARTICLE,
        build_seo_article_prompt(project, knowledge, body),
        max_tokens=SEO_ARTICLE_MAX_TOKENS,
    )
    text = generated.text

    words = word_count(text)
    title = extract_title(text, body.target_keyword)
    markers = count_markers(text)

    article = SEOArticle(
        project_id=project.id,
        title=title,
        slug=slugify(title),
        content=text,
        content_html=markdown.markdown(text),
        meta_title=title,
        meta_description=extract_meta_description(text),
        language=body.language,
        keywords=[body.target_keyword],
        target_keyword=body.target_keyword,
        word_count=words,
        reading_time=f"{reading_time_minutes(words)} min read",
        has_table_of_contents=body.include_toc,
        has_faq=body.include_faq,
        internal_links_count=markers["internal_links"],
        external_links_count=markers["external_links"],
        images_count=markers["images"],
        status=SEOArticleStatus.REVIEW,
        ai_model=generated.model,
    )
    db.add(article)
    await db.flush()

    report = run_quality_check(text)
    check = QualityCheck(
        article_id=article.id,
        plagiarism_score=report.plagiarism_score,
        grammar_errors=report.grammar_errors,
        readability_score=report.readability_score,
        seo_score=report.seo_score,
        e_e_a_t_score=report.e_e_a_t_score,
        passed=report.passed,
    )
    db.add(check)

    await db.commit()
    await db.refresh(article)
    await db.refresh(check)

    logger.info(
        "Generated SEO article %s for project %s (%d words, quality passed=%s)",
        article.id, project.id, words, report.passed,
    )
    return {"article": article, "qualityCheck": check}
