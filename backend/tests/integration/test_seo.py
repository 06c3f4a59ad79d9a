"""Integration tests for SEO project, knowledge and article generation endpoints."""
import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from unittest.mock import Mock
from uuid import uuid4

from adapters.ai import GeneratedText
from core.ai_router import TaskType
from infrastructure.database.models import KnowledgeEntry, QualityCheck, SEOProject, User

pytestmark = pytest.mark.asyncio

GENERATED_ARTICLE = """# Edge Computing for Retail

Edge computing moves processing close to the store floor so checkout and inventory systems react in milliseconds.

## Why it matters

Retailers cut latency [INTERNAL_LINK: latency guide] and keep working offline [EXTERNAL_LINK: Gartner].

[IMAGE: edge server rack in a supermarket]
"""


@pytest.fixture
async def seo_project(db_session: AsyncSession, test_user: User) -> SEOProject:
    project = SEOProject(
        id=str(uuid4()),
        user_id=test_user.id,
        name="Retail Tech Blog",
        domain="retail.example.com",
        industry="Retail",
        target_audience="CTOs",
        brand_tone="authoritative",
    )
    db_session.add(project)
    await db_session.commit()
    return project


class TestProjects:
    """Tests for /seo/projects."""

    async def test_create_and_list_projects(
        self,
        async_client: AsyncClient,
        auth_headers: dict,
        test_user: User,
    ):
        response = await async_client.post(
            "/api/v1/seo/projects",
            headers=auth_headers,
            json={"name": "Fintech Weekly", "industry": "Finance", "targetAudience": "founders"},
        )

        assert response.status_code == 201
        project = response.json()["project"]
        assert project["name"] == "Fintech Weekly"
        assert project["target_audience"] == "founders"
        assert project["user_id"] == test_user.id
        assert project["primary_language"] == "en"

        listing = await async_client.get("/api/v1/seo/projects", headers=auth_headers)
        assert listing.status_code == 200
        assert [p["name"] for p in listing.json()["projects"]] == ["Fintech Weekly"]

    async def test_list_project_articles_foreign_project(
        self,
        async_client: AsyncClient,
        other_auth_headers: dict,
        seo_project: SEOProject,
    ):
        response = await async_client.get(
            f"/api/v1/seo/projects/{seo_project.id}/articles", headers=other_auth_headers
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Project not found"

    async def test_projects_unauthenticated(self, async_client: AsyncClient):
        response = await async_client.get("/api/v1/seo/projects")

        assert response.status_code == 401


class TestKnowledge:
    """Tests for /seo/projects/{id}/knowledge."""

    async def test_add_and_list_knowledge(
        self,
        async_client: AsyncClient,
        auth_headers: dict,
        seo_project: SEOProject,
    ):
        response = await async_client.post(
            f"/api/v1/seo/projects/{seo_project.id}/knowledge",
            headers=auth_headers,
            json={"title": "Brand voice", "content": "Plain language, no hype."},
        )

        assert response.status_code == 201
        assert response.json()["entry"]["project_id"] == seo_project.id

        listing = await async_client.get(
            f"/api/v1/seo/projects/{seo_project.id}/knowledge", headers=auth_headers
        )
        assert listing.status_code == 200
        assert [k["title"] for k in listing.json()["knowledge"]] == ["Brand voice"]

    async def test_add_knowledge_missing_project(self, async_client: AsyncClient, auth_headers: dict):
        response = await async_client.post(
            f"/api/v1/seo/projects/{uuid4()}/knowledge",
            headers=auth_headers,
            json={"title": "x", "content": "y"},
        )

        assert response.status_code == 404


class TestGenerateArticle:
    """Tests for POST /seo/articles/generate."""

    async def test_generate_article(
        self,
        async_client: AsyncClient,
        auth_headers: dict,
        db_session: AsyncSession,
        seo_project: SEOProject,
        mock_ai_service: Mock,
    ):
        db_session.add(
            KnowledgeEntry(project_id=seo_project.id, title="Differentiator", content="We run 400 stores.")
        )
        await db_session.commit()
        mock_ai_service.generate_for_task.return_value = GeneratedText(
            text=GENERATED_ARTICLE, model="gpt-4o", usage_tokens=900
        )

        response = await async_client.post(
            "/api/v1/seo/articles/generate",
            headers=auth_headers,
            json={
                "projectId": seo_project.id,
                "targetKeyword": "edge computing retail",
                "wordCount": 1200,
                "includeFaq": False,
            },
        )

        assert response.status_code == 200
        data = response.json()
        article = data["article"]
        assert article["title"] == "Edge Computing for Retail"
        assert article["slug"] == "edge-computing-for-retail"
        assert article["status"] == "review"
        assert article["meta_description"].startswith("Edge computing moves processing")
        assert article["meta_description"].endswith("...")
        assert article["internal_links_count"] == 1
        assert article["external_links_count"] == 1
        assert article["images_count"] == 1
        assert article["has_faq"] is False
        assert article["has_table_of_contents"] is True
        assert article["keywords"] == ["edge computing retail"]
        assert "<h1>Edge Computing for Retail</h1>" in article["content_html"]
        assert article["ai_model"] == "gpt-4o"

        check = data["qualityCheck"]
        assert check["e_e_a_t_score"] == 85
        assert check["grammar_errors"] == 0

        task, prompt = mock_ai_service.generate_for_task.call_args.args
        assert task == TaskType.SEO_ARTICLE
        assert "TARGET KEYWORD: edge computing retail" in prompt
        assert "Differentiator: We run 400 stores." in prompt
        assert "End with a strong conclusion" in prompt

        stored = await db_session.execute(
            select(QualityCheck).where(QualityCheck.article_id == article["id"])
        )
        assert stored.scalar_one_or_none() is not None

    async def test_generate_article_title_falls_back_to_keyword(
        self,
        async_client: AsyncClient,
        auth_headers: dict,
        seo_project: SEOProject,
        mock_ai_service: Mock,
    ):
        mock_ai_service.generate_for_task.return_value = GeneratedText(
            text="No heading here.", model="llama-3.3-70b-versatile"
        )

        response = await async_client.post(
            "/api/v1/seo/articles/generate",
            headers=auth_headers,
            json={"projectId": seo_project.id, "targetKeyword": "Smart Shelves"},
        )

        assert response.status_code == 200
        article = response.json()["article"]
        assert article["title"] == "Smart Shelves"
        assert article["meta_description"] == "No heading here...."

    async def test_generate_article_foreign_project(
        self,
        async_client: AsyncClient,
        other_auth_headers: dict,
        seo_project: SEOProject,
        mock_ai_service: Mock,
    ):
        response = await async_client.post(
            "/api/v1/seo/articles/generate",
            headers=other_auth_headers,
            json={"projectId": seo_project.id, "targetKeyword": "anything"},
        )

        assert response.status_code == 404
        mock_ai_service.generate_for_task.assert_not_called()

    async def test_generated_article_listed_under_project(
        self,
        async_client: AsyncClient,
        auth_headers: dict,
        seo_project: SEOProject,
        mock_ai_service: Mock,
    ):
        mock_ai_service.generate_for_task.return_value = GeneratedText(
            text=GENERATED_ARTICLE, model="gpt-4o"
        )
        await async_client.post(
            "/api/v1/seo/articles/generate",
            headers=auth_headers,
            json={"projectId": seo_project.id, "targetKeyword": "edge"},
        )

        response = await async_client.get(
            f"/api/v1/seo/projects/{seo_project.id}/articles", headers=auth_headers
        )

        assert response.status_code == 200
        assert len(response.json()["articles"]) == 1
