"""
Heuristic detection of the analysis context (industry, level, language)
from raw CV content.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

from config import DEFAULT_TARGET_ROLE
from models.cv_models import AnalysisContext
from services.cv_analyzer import as_list, as_text, cv_content
import logging

logger = logging.getLogger(__name__)

# Ordered: on equal scores the earlier industry wins
INDUSTRY_DETECTION_KEYWORDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("tech", (
        "javascript", "python", "react", "node", "aws", "docker", "api",
        "database", "software", "developer", "engineer",
    )),
    ("marketing", (
        "marketing", "seo", "campaign", "brand", "social media", "analytics", "content",
    )),
    ("finance", (
        "finance", "accounting", "budget", "financial", "audit", "investment", "banking",
    )),
    ("healthcare", (
        "healthcare", "medical", "patient", "clinical", "nurse", "doctor", "hospital",
    )),
    ("sales", (
        "sales", "revenue", "client", "customer", "crm", "lead", "quota", "negotiation",
    )),
)

SENIORITY_KEYWORDS = ("led", "managed", "director", "senior", "lead", "head of", "vp", "chief")

YEARS_PER_ENTRY = 2

# Markers that are also common English words ("in", "no") are left out
LANGUAGE_MARKERS: Tuple[Tuple[str, frozenset], ...] = (
    ("es", frozenset(["el", "la", "de", "que", "y", "en", "un", "es", "se", "los", "las", "del"])),
    ("fr", frozenset(["le", "la", "de", "que", "et", "en", "un", "est", "se", "ne", "les", "des", "du"])),
    ("de", frozenset(["der", "die", "und", "den", "von", "zu", "das", "mit", "sich", "ist", "im", "ein"])),
)

MIN_LANGUAGE_MARKERS = 2


def _content_text(cv_data: Optional[Dict[str, Any]]) -> str:
    content = cv_data.get("content") if isinstance(cv_data, dict) else None
    return json.dumps(content, ensure_ascii=False, default=str).lower()


def _argmax(scores: List[Tuple[str, int]]) -> str:
    best_name, best_score = scores[0]
    for name, score in scores[1:]:
        if score > best_score:
            best_name, best_score = name, score
    return best_name


def detect_industry(cv_data: Optional[Dict[str, Any]]) -> str:
    """Pick the industry whose keywords appear most often in the CV content."""
    content = _content_text(cv_data)
    scores = [
        (industry, sum(1 for keyword in keywords if keyword in content))
        for industry, keywords in INDUSTRY_DETECTION_KEYWORDS
    ]
    return _argmax(scores)


def detect_experience_level(cv_data: Optional[Dict[str, Any]]) -> str:
    experiences = as_list(cv_content(cv_data).get("experience"))
    total_years = len(experiences) * YEARS_PER_ENTRY

    content = _content_text(cv_data)
    senior_matches = sum(1 for keyword in SENIORITY_KEYWORDS if keyword in content)

    if senior_matches >= 3 or total_years >= 10:
        return "executive"
    if senior_matches >= 2 or total_years >= 5:
        return "senior"
    if total_years >= 2:
        return "mid"
    return "entry"


def detect_language(text: Optional[str]) -> str:
    """
    Guess the language of free text from common function words.

    A language is only chosen when it has at least two marker words and
    strictly more than every other candidate; otherwise English is assumed.
    """
    words = (text or "").lower().split()
    counts = [
        (language, sum(1 for word in words if word in markers))
        for language, markers in LANGUAGE_MARKERS
    ]
    for language, count in counts:
        if count < MIN_LANGUAGE_MARKERS:
            continue
        if all(count > other for other_language, other in counts if other_language != language):
            return language
    return "en"


def cv_text(cv_data: Optional[Dict[str, Any]]) -> str:
    """Free text of a CV (summary and experience descriptions)."""
    content = cv_content(cv_data)
    parts = [as_text(content.get("summary"))]
    for entry in as_list(content.get("experience")):
        if isinstance(entry, dict):
            parts.append(as_text(entry.get("description")))
    return " ".join(part for part in parts if part)


def build_context(
    cv_data: Optional[Dict[str, Any]],
    target_role: Optional[str] = None,
    industry: Optional[str] = None,
    level: Optional[str] = None,
    language: Optional[str] = None,
) -> AnalysisContext:
    """Build the analysis context, preferring explicit values over detection."""
    context = AnalysisContext(
        industry=industry or detect_industry(cv_data),
        level=level or detect_experience_level(cv_data),
        target_role=target_role or DEFAULT_TARGET_ROLE,
        language=language or detect_language(cv_text(cv_data)),
    )
    logger.info(
        f"Analysis context: industry={context.industry}, level={context.level}, "
        f"language={context.language}"
    )
    return context
