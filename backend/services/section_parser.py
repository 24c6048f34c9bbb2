"""Job description section detection and contact extraction.

Postings arrive as flat prose with their HTML stripped, so sections are
located by keyword-anchored windows rather than by header lines. Each
section's captured span is cut out of a working buffer before the next
category is searched, which makes the scan order part of the contract:

    contact -> responsibilities -> requirements -> skills -> company -> overview
"""

import logging
import re

from models.schemas.content_sections import ContentSections

logger = logging.getLogger(__name__)

# Contact keyword followed, within a bounded window, by a phone number or email
CONTACT_LOOKAHEAD = 200
CONTACT_RE = re.compile(
    r"(?:contact|call|phone|email)"
    rf"[\s\S]{{0,{CONTACT_LOOKAHEAD}}}?"
    r"(?:\d{3}[\s-]?\d{3}[\s-]?\d{4}|\d{10}|[\w.-]+@[\w.-]+)",
    re.IGNORECASE,
)

# Category anchors, searched in priority order within each category
SECTION_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("responsibilities", (
        "responsibilities", "duties", "tasks", "role", "position", "areas include",
    )),
    ("requirements", (
        "requirements", "qualifications", "experience", "education", "minimum", "must have",
    )),
    ("skills", (
        "skills", "competencies", "abilities", "technical", "software", "computer",
    )),
    ("company_info", (
        "company", "organization", "group", "about us", "our", "we are",
    )),
)

LIST_SECTIONS = frozenset({"responsibilities", "requirements", "skills"})

SECTION_WINDOW = 500  # characters captured after the anchor keyword
BULLET_RE = re.compile(r"[-•·]")
MIN_ITEM_LENGTH = 10
MAX_ITEM_LENGTH = 150  # exclusive
MAX_ITEMS = 8
COMPANY_INFO_MAX = 300
OVERVIEW_MAX = 200

_SECTION_RES: dict[str, list[re.Pattern]] = {
    section: [
        re.compile(rf"\b{re.escape(keyword)}[\s\S]{{0,{SECTION_WINDOW}}}", re.IGNORECASE)
        for keyword in keywords
    ]
    for section, keywords in SECTION_KEYWORDS
}


def extract_contact_info(content: str) -> tuple[str, str]:
    """Pull contact spans out of the text.

    Returns (contact_info, remaining_text). Every occurrence of every
    matched span is removed, case-insensitively, as literal text.
    """
    spans = [m.group() for m in CONTACT_RE.finditer(content)]
    if not spans:
        return "", content

    contact_info = " ".join(spans).strip()
    removal_re = re.compile("|".join(re.escape(s) for s in spans), re.IGNORECASE)
    return contact_info, removal_re.sub("", content)


def extract_section(content: str, section: str) -> re.Match | None:
    """Find the window for the first anchor keyword of a category that occurs.

    Keywords are tried in priority order, so a later keyword is only used
    when none of the earlier ones appear anywhere in the text.
    """
    for pattern in _SECTION_RES[section]:
        match = pattern.search(content)
        if match:
            return match
    return None


def extract_list_items(section_text: str) -> list[str]:
    """Split a captured window on bullet markers into list items."""
    items = [item.strip() for item in BULLET_RE.split(section_text)]
    items = [item for item in items if MIN_ITEM_LENGTH <= len(item) < MAX_ITEM_LENGTH]
    return items[:MAX_ITEMS]


def identify_content_sections(content: str) -> ContentSections:
    """Partition a normalized posting body into logical sections.

    Whatever text is left after all categories have been cut out becomes
    the overview.
    """
    sections = ContentSections()

    sections.contact_info, remaining = extract_contact_info(content)

    for section, _ in SECTION_KEYWORDS:
        match = extract_section(remaining, section)
        if match is None:
            continue

        captured = match.group()
        remaining = remaining[: match.start()] + remaining[match.end():]

        if section in LIST_SECTIONS:
            setattr(sections, section, extract_list_items(captured))
        else:
            sections.company_info = captured[:COMPANY_INFO_MAX]

    sections.overview = remaining.strip()[:OVERVIEW_MAX]

    logger.debug(
        "Detected sections: %s",
        [name for name, value in sections.model_dump().items() if value],
    )
    return sections
