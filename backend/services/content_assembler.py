"""Re-assemble a posting body into structured HTML sections."""

import re

from models.schemas.content_sections import ContentSections
from models.schemas.job_posting import JobPosting
from services.section_parser import identify_content_sections

# Entity remnants left behind by the content system's rendered output
HTML_ENTITY_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("&#8211;", "-"),
    ("&#038;", "&"),
)

_WHITESPACE_RE = re.compile(r"\s+")

# (heading, section attribute, render as list), in emission order
SECTION_LAYOUT: tuple[tuple[str, str, bool], ...] = (
    ("Job Overview", "overview", False),
    ("Key Responsibilities", "responsibilities", True),
    ("Requirements", "requirements", True),
    ("Required Skills", "skills", True),
    ("About the Company", "company_info", False),
    ("How to Apply", "application_info", False),
    ("Contact Information", "contact_info", False),
)


def normalize_content(text: str) -> str:
    """Decode entity remnants and collapse whitespace."""
    for entity, replacement in HTML_ENTITY_REPLACEMENTS:
        text = text.replace(entity, replacement)
    return _WHITESPACE_RE.sub(" ", text).strip()


def _render_block(heading: str, value: str | list[str], as_list: bool) -> str:
    if as_list:
        items = "".join(f"<li>{item}</li>\n" for item in value)
        return f"<h2>{heading}</h2>\n<ul>\n{items}</ul>"
    return f"<h2>{heading}</h2>\n<p>{value}</p>"


def render_sections(sections: ContentSections) -> str:
    """Render non-empty sections in fixed order, separated by blank lines."""
    if sections.is_empty():
        return ""
    blocks = [
        _render_block(heading, getattr(sections, attr), as_list)
        for heading, attr, as_list in SECTION_LAYOUT
        if getattr(sections, attr)
    ]
    return "\n\n".join(blocks) + "\n"


def restructure_content(posting: JobPosting) -> str:
    """Sectioned HTML for the posting body.

    Falls back to the normalized body when no section has content, so a
    non-empty description never yields an empty result.
    """
    content = normalize_content(posting.description)
    sections = identify_content_sections(content)
    return render_sections(sections) or content
