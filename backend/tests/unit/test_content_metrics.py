"""
Tests for text metrics, quality checks and the SEO content audit.
"""

import pytest

from services.content_metrics import (
    analyze_seo_content,
    count_markers,
    extract_meta_description,
    extract_title,
    readability_score,
    reading_time_minutes,
    run_quality_check,
    seo_score,
    slugify,
    word_count,
)


class TestBasicMetrics:
    def test_word_count_splits_on_whitespace(self):
        assert word_count("one  two\nthree\tfour") == 4

    def test_reading_time_rounds_up(self):
        assert reading_time_minutes(201) == 2
        assert reading_time_minutes(200) == 1

    def test_slugify(self):
        assert slugify("Edge AI: What's Next?") == "edge-ai-what-s-next-"

    def test_extract_title(self):
        assert extract_title("Intro\n# The Real Title \nBody", "fallback") == "The Real Title"
        assert extract_title("## Only H2", "fallback") == "fallback"

    def test_meta_description_uses_second_paragraph(self):
        text = "# Title\n\n" + "x" * 200 + "\n\nThird"

        meta = extract_meta_description(text)

        assert meta == "x" * 155 + "..."

    def test_meta_description_falls_back_to_opening(self):
        assert extract_meta_description("Single paragraph") == "Single paragraph..."

    def test_count_markers(self):
        text = "[INTERNAL_LINK: a] [INTERNAL_LINK: b] [EXTERNAL_LINK: c] [IMAGE: d]"

        assert count_markers(text) == {"internal_links": 2, "external_links": 1, "images": 1}


class TestQualityCheck:
    def test_seo_score_rewards_structure(self):
        text = "# T\n\n## S\n\n[INTERNAL_LINK: x] [EXTERNAL_LINK: y] " + "word " * 801

        assert seo_score(text) == 100

    def test_seo_score_baseline(self):
        assert seo_score("plain text") == 50

    def test_readability_is_clamped(self):
        assert 0 <= readability_score("Short. Sentences. Here.") <= 100
        assert readability_score(" ".join(["word"] * 1000)) == 0.0

    def test_quality_check_pass_thresholds(self):
        structured = (
            "# Guide\n\n## Part\n\nShort sentences help. They read well. "
            "[INTERNAL_LINK: a] [EXTERNAL_LINK: b]"
        )

        report = run_quality_check(structured)

        assert report.seo_score == 90
        assert report.readability_score > 60
        assert report.passed is True
        assert report.e_e_a_t_score == 85
        assert report.plagiarism_score == 0.0

    def test_quality_check_fails_low_seo(self):
        assert run_quality_check("Tiny.").passed is False


class TestAnalyzeSeoContent:
    def test_short_unstructured_content(self):
        result = analyze_seo_content("A short post about nothing.")

        assert result["wordCount"] == 5
        assert "Content too short for good SEO" in result["issues"]
        assert "Missing proper heading structure" in result["issues"]
        assert "Insufficient internal/external links" in result["issues"]
        assert "Define a target keyword for better optimization" in result["suggestions"]
        # 100 - 3*15 - (300-5)/10
        assert result["score"] == round(100 - 45 - 29.5)
        assert result["status"] == "poor"

    def test_keyword_density_too_low(self):
        content = "## A\n## B\n[x](y) [z](w) " + "filler " * 400

        result = analyze_seo_content(content, "quantum")

        assert result["issues"] == []
        assert result["score"] == 100
        assert result["status"] == "excellent"
        assert 'Increase keyword "quantum" density to 0.5-2%' in result["suggestions"]

    def test_keyword_density_too_high(self):
        content = "## A\n## B\n[x](y) [z](w) " + "seo " * 400

        result = analyze_seo_content(content, "SEO")

        assert "Reduce keyword density to avoid over-optimization" in result["suggestions"]

    @pytest.mark.parametrize(
        "words,expected",
        [(0, "needs improvement"), (150, "good")],
    )
    def test_status_bands(self, words, expected):
        content = "## A\n## B\n[x](y) [z](w) " + "w " * words

        result = analyze_seo_content(content, None)

        assert result["status"] == expected
