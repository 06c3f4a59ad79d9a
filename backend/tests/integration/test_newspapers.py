"""Integration tests for the newspaper copilot endpoint."""
import json

import pytest
from httpx import AsyncClient

from adapters.ai import ChatTurn, ToolCall

pytestmark = pytest.mark.asyncio


def parse_sse(body: str) -> list:
    events = []
    for block in body.strip().split("\n\n"):
        lines = dict(line.split(": ", 1) for line in block.splitlines())
        events.append((lines["event"], json.loads(lines["data"])))
    return events


class TestGenerateNewspaper:
    """Tests for POST /newspapers/generate."""

    async def test_configure_generate_validate(
        self,
        async_client: AsyncClient,
        auth_headers: dict,
        scripted_provider,
    ):
        """One model step calls all three editorial tools, the next one answers."""
        scripted_provider.turns.extend(
            [
                ChatTurn(
                    tool_calls=[
                        ToolCall(
                            id="c1",
                            name="configureEditorial",
                            arguments={"subject": "Renewable energy", "userIntent": "inform investors"},
                        ),
                        ToolCall(
                            id="c2",
                            name="generateNewspaper",
                            arguments={"totalPages": 4, "mainTheme": "Renewable energy", "editorialStyle": "formal"},
                        ),
                        ToolCall(
                            id="c3",
                            name="validateQuality",
                            arguments={"newspaperContent": "{}"},
                        ),
                    ]
                ),
                ChatTurn(text="Your 4-page edition is ready."),
            ]
        )

        response = await async_client.post(
            "/api/v1/newspapers/generate",
            headers=auth_headers,
            json={"messages": [{"role": "user", "content": "A newspaper about renewable energy"}]},
        )

        assert response.status_code == 200
        events = parse_sse(response.text)
        results = {d["name"]: d["result"] for e, d in events if e == "tool-result"}

        config = results["configureEditorial"]
        assert config["configuration"]["analysis"]["recommended_pages"] == 4
        assert config["ready_to_generate"] is False

        paper = results["generateNewspaper"]
        assert paper["success"] is True
        assert paper["exportFormats"] == ["json", "html", "pdf"]
        meta = paper["newspaper"]["journal_metadata"]
        assert meta["total_pages"] == 4
        assert meta["estimated_reading_time"] == "14 minutes"
        pages = paper["newspaper"]["pages"]
        assert [p["page_category"] for p in pages] == [
            "Main Story",
            "Breaking News",
            "Analysis & Features",
            "Future Outlook",
        ]
        assert pages[0]["page_layout_recommendations"]["color_scheme"] == "classic_black_white"

        quality = results["validateQuality"]
        assert 90 <= quality["overall_quality_score"] <= 99
        assert quality["validation_passed"] is True

        assert events[-1] == (
            "finish",
            {
                "text": "Your 4-page edition is ready.",
                "toolCalls": events[-1][1]["toolCalls"],
                "steps": 2,
            },
        )
        assert "senior digital journalist" in scripted_provider.chat_calls[0]["system"]

    async def test_invalid_tool_arguments_reported_to_model(
        self,
        async_client: AsyncClient,
        auth_headers: dict,
        scripted_provider,
    ):
        scripted_provider.turns.append(
            ChatTurn(
                tool_calls=[
                    ToolCall(id="c1", name="generateNewspaper", arguments={"totalPages": 80, "mainTheme": "x"})
                ]
            )
        )

        response = await async_client.post(
            "/api/v1/newspapers/generate",
            headers=auth_headers,
            json={"messages": [{"role": "user", "content": "80 pages please"}]},
        )

        events = parse_sse(response.text)
        result = events[1][1]["result"]
        assert result["error"] == "Invalid arguments for generateNewspaper"
        assert events[-1][0] == "finish"

        tool_turn = scripted_provider.chat_calls[1]["messages"][-1]
        assert tool_turn["role"] == "tool"
        assert tool_turn["tool_call_id"] == "c1"

    async def test_newspaper_unauthenticated(self, async_client: AsyncClient):
        response = await async_client.post(
            "/api/v1/newspapers/generate",
            json={"messages": [{"role": "user", "content": "hi"}]},
        )

        assert response.status_code == 401
