from __future__ import annotations

from typing import Iterable

# Category label -> keywords searched for (as substrings) in each
# lower-cased specialized field.
CATEGORY_KEYWORDS: dict[str, list[str]] = {
    "Engineering": [
        "engineering",
        "computer",
        "software",
        "machine learning",
        "artificial intelligence",
        "robotics",
        "electronics",
        "electrical",
        "mechanical",
        "civil",
        "technology",
        "programming",
        "coding",
    ],
    "Medical": [
        "medicine",
        "medical",
        "biology",
        "mbbs",
        "nursing",
        "pharmacy",
        "dental",
        "surgery",
        "healthcare",
        "anatomy",
    ],
    "Management": [
        "management",
        "business",
        "mba",
        "marketing",
        "finance",
        "entrepreneur",
        "leadership",
        "human resource",
    ],
    "University": [
        "research",
        "humanities",
        "liberal",
        "law",
        "literature",
        "history",
    ],
    "Agricultural University": [
        "agriculture",
        "agricultural",
        "farming",
        "horticulture",
        "forestry",
        "veterinary",
        "dairy",
        "fisheries",
    ],
    "Arts & Science": [
        "arts",
        "psychology",
        "sociology",
        "philosophy",
        "journalism",
        "design",
        "music",
        "fine art",
    ],
    "Science": [
        "physics",
        "chemistry",
        "mathematics",
        "statistics",
        "astronomy",
        "geology",
        "zoology",
        "botany",
        "data science",
    ],
    "Commerce": [
        "commerce",
        "accounting",
        "accountancy",
        "economics",
        "banking",
        "taxation",
        "audit",
        "chartered",
    ],
}

FALLBACK_TYPES: tuple[str, ...] = ("University", "Engineering", "Science")


def derive_matched_types(
    specialized_fields: Iterable[str],
    table: dict[str, list[str]] = CATEGORY_KEYWORDS,
) -> set[str]:
    """Return every category label with a keyword contained in some field."""
    matched: set[str] = set()
    for field in specialized_fields:
        if not isinstance(field, str):
            continue
        lowered = field.lower()
        for label, keywords in table.items():
            if any(keyword in lowered for keyword in keywords):
                matched.add(label)
    return matched


def type_matches(college_type: object, labels: Iterable[str]) -> bool:
    """
    Check a catalog ``type`` against category labels.

    A string type matches on substring containment, a list type on
    element membership.
    """
    if isinstance(college_type, (str, list, tuple)):
        return any(label in college_type for label in labels)
    return False
