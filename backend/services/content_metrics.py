"""
Text metrics used for rewrites, SEO articles and the SEO optimizer tool.

All scores are simple heuristics over word, sentence, heading and marker
counts.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional

WORDS_PER_MINUTE = 200

_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_H1 = re.compile(r"^#\s+", re.MULTILINE)
_H2 = re.compile(r"^##\s+", re.MULTILINE)
_TITLE = re.compile(r"^#\s+(.+)$", re.MULTILINE)
_HEADING = re.compile(r"#{1,6}\s")
_MARKDOWN_LINK = re.compile(r"\[[^\]]*?\]\([^)]*?\)")
_SLUG_INVALID = re.compile(r"[^a-z0-9]+")

INTERNAL_LINK_MARKER = "[INTERNAL_LINK:"
EXTERNAL_LINK_MARKER = "[EXTERNAL_LINK:"
IMAGE_MARKER = "[IMAGE:"

META_DESCRIPTION_LENGTH = 155
E_E_A_T_BASELINE = 85


def word_count(text: str) -> int:
    return len(text.split())


def reading_time_minutes(words: int) -> int:
    return math.ceil(words / WORDS_PER_MINUTE)


def slugify(title: str) -> str:
    """Lowercase ``title`` and collapse every non-alphanumeric run into ``-``."""
    return _SLUG_INVALID.sub("-", title.lower())


def extract_title(text: str, fallback: str) -> str:
    """First markdown H1, or ``fallback`` when the text has none."""
    match = _TITLE.search(text)
    return match.group(1).strip() if match else fallback


def extract_meta_description(text: str) -> str:
    """Second paragraph (else the first 300 chars) cut to 155 chars plus ellipsis."""
    paragraphs = text.split("\n\n")
    source = paragraphs[1] if len(paragraphs) > 1 and paragraphs[1] else text[:300]
    return source[:META_DESCRIPTION_LENGTH] + "..."


def count_markers(text: str) -> dict:
    return {
        "internal_links": text.count(INTERNAL_LINK_MARKER),
        "external_links": text.count(EXTERNAL_LINK_MARKER),
        "images": text.count(IMAGE_MARKER),
    }


def readability_score(text: str) -> float:
    """Flesch reading-ease approximation clamped to 0..100.

    Sentences are the fragments left after splitting on terminal punctuation,
    so a trailing fragment after the final period counts as well.
    """
    sentences = len(_SENTENCE_SPLIT.split(text))
    words = word_count(text)
    avg_words_per_sentence = words / sentences
    return min(100.0, max(0.0, 206.835 - 1.015 * avg_words_per_sentence))


def seo_score(text: str) -> int:
    score = 50
    if _H1.search(text):
        score += 10
    if _H2.search(text):
        score += 10
    if word_count(text) > 800:
        score += 10
    if INTERNAL_LINK_MARKER in text:
        score += 10
    if EXTERNAL_LINK_MARKER in text:
        score += 10
    return min(100, score)


@dataclass
class QualityReport:
    plagiarism_score: float
    grammar_errors: int
    readability_score: float
    seo_score: int
    e_e_a_t_score: int
    passed: bool


def run_quality_check(text: str) -> QualityReport:
    """Score a generated article.

    Plagiarism and grammar are placeholders until an external checker is wired in.
    """
    readability = readability_score(text)
    seo = seo_score(text)
    return QualityReport(
        plagiarism_score=0.0,
        grammar_errors=0,
        readability_score=readability,
        seo_score=seo,
        e_e_a_t_score=E_E_A_T_BASELINE,
        passed=readability > 60 and seo > 70,
    )


def _seo_status(score: float) -> str:
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    if score >= 40:
        return "needs improvement"
    return "poor"


def analyze_seo_content(content: str, target_keyword: Optional[str] = None) -> dict:
    """Audit content for length, heading structure, links and keyword density."""
    words = word_count(content)
    headings = len(_HEADING.findall(content))
    links = len(_MARKDOWN_LINK.findall(content))

    issues = []
    suggestions = []

    if words < 300:
        issues.append("Content too short for good SEO")
        suggestions.append("Expand to at least 800-1500 words for better ranking")

    if headings < 2:
        issues.append("Missing proper heading structure")
        suggestions.append("Add H2 and H3 headings for better content structure")

    if links < 2:
        issues.append("Insufficient internal/external links")
        suggestions.append("Add 3-5 relevant internal links and 2-3 authoritative external links")

    if not target_keyword:
        suggestions.append("Define a target keyword for better optimization")
    else:
        occurrences = content.lower().count(target_keyword.lower())
        density = occurrences / max(words, 1) * 100
        if density < 0.5:
            suggestions.append(f'Increase keyword "{target_keyword}" density to 0.5-2%')
        elif density > 3:
            suggestions.append("Reduce keyword density to avoid over-optimization")

    score = max(0.0, 100 - len(issues) * 15 - max(0.0, (300 - words) / 10))

    return {
        "score": round(score),
        "wordCount": words,
        "readingTime": reading_time_minutes(words),
        "headingsCount": headings,
        "linksCount": links,
        "issues": issues,
        "suggestions": suggestions,
        "targetKeyword": target_keyword,
        "status": _seo_status(score),
    }
