from __future__ import annotations

import logging
import re
from typing import Any

from ..assessments.service import find_assessment
from ..errors import NotFoundError, ValidationError
from ..storage import RecordStore
from .categories import FALLBACK_TYPES, derive_matched_types, type_matches
from .models import RecommendationResponse

logger = logging.getLogger(__name__)

RECOMMENDATION_LIMIT = 10

# Ranking fields copied from the catalog summary onto the merged entry.
RANKING_FIELDS = (
    "nirf",
    "naac",
    "placement",
    "review",
    "location",
    "ownership",
    "entranceExam",
)

_DETAIL_LINK_RE = re.compile(r"/colleges/([^/]+)$")


def extract_detail_id(link: object) -> str | None:
    """``"./college-dashboard.html?data=./colleges/abc"`` -> ``"abc"``."""
    if not isinstance(link, str):
        return None
    match = _DETAIL_LINK_RE.search(link)
    return match.group(1) if match else None


def filter_catalog(
    colleges: list[dict[str, Any]], matched_types: set[str]
) -> list[dict[str, Any]]:
    """Keep colleges whose type hits a matched label, else apply the fallback labels."""
    selected = [c for c in colleges if type_matches(c.get("type"), matched_types)]
    if not selected:
        selected = [c for c in colleges if type_matches(c.get("type"), FALLBACK_TYPES)]
    return selected


def _first_record(detail: Any) -> dict[str, Any] | None:
    if isinstance(detail, list):
        first = detail[0] if detail else None
    else:
        first = detail
    return first if isinstance(first, dict) and first else None


def merge_detail(summary: dict[str, Any], detail_record: dict[str, Any]) -> dict[str, Any]:
    merged = dict(detail_record)
    merged["basicInfo"] = summary
    for field in RANKING_FIELDS:
        if field in summary:
            merged[field] = summary[field]
    return merged


def enrich(store: RecordStore, colleges: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Join each college with its detail document; colleges without one are dropped."""
    enriched = []
    for summary in colleges:
        identifier = extract_detail_id(summary.get("link"))
        if identifier is None:
            continue
        record = _first_record(store.load_college_detail(identifier))
        if record is None:
            logger.debug("No detail document for %s", identifier)
            continue
        enriched.append(merge_detail(summary, record))
    return enriched


def get_recommendations(store: RecordStore, username: str) -> RecommendationResponse:
    """
    Build college suggestions from the user's stored assessment.

    Raises ``NotFoundError`` if the user has not taken the assessment.
    """
    if not username or not username.strip():
        raise ValidationError("Username is required")

    assessment = find_assessment(store, username)
    if assessment is None:
        raise NotFoundError("Assessment not found")

    interests = assessment.get("specializedFields") or []
    if not isinstance(interests, list):
        interests = []
    interests = [f for f in interests if isinstance(f, str)]
    matched_types = derive_matched_types(interests)

    selected = filter_catalog(store.load_colleges(), matched_types)
    merged = enrich(store, selected)

    return RecommendationResponse(
        user_interests=interests,
        matched_types=sorted(matched_types),
        recommended_colleges=merged[:RECOMMENDATION_LIMIT],
        stream=assessment.get("stream"),
        total_found=len(merged),
    )
