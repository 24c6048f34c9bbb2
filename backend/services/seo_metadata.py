"""Derived SEO metadata: normalized title, focus keyphrase, meta description."""

import re

from models.schemas.job_posting import JobPosting
from models.schemas.keyword_candidate import KeywordCandidate

# Punctuation replaced by spaces in titles; hyphens are kept
_TITLE_PUNCTUATION_RE = re.compile(r"[!@#$%^&*()_+={}\[\]|\\:\";'<>?,./~`]")
_WHITESPACE_RE = re.compile(r"\s+")
_WORD_START_RE = re.compile(r"\b\w")
_NON_WORD_RE = re.compile(r"[^\w\s]")

LOCALITY_MARKERS: tuple[str, ...] = ("remote", "south africa", "cape town", "johannesburg")
LOCALITY_SUFFIX = " - South Africa"

FOCUS_KEYPHRASE_TERMS = 3

META_DESCRIPTION_MAX = 160
ELLIPSIS = "..."
DEFAULT_COMPANY = "Leading company"
DEFAULT_LOCATION = "South Africa"
DEFAULT_JOB_TYPE = "position"


def optimize_title(title: str) -> str:
    """Clean punctuation, title-case each word and add a locality marker.

    Titles that already mention one of LOCALITY_MARKERS are returned
    without a suffix, which makes the function idempotent on its output.
    """
    optimized = _TITLE_PUNCTUATION_RE.sub(" ", title)
    optimized = _WHITESPACE_RE.sub(" ", optimized).strip()
    optimized = _WORD_START_RE.sub(lambda m: m.group().upper(), optimized)

    lowered = optimized.lower()
    if not any(marker in lowered for marker in LOCALITY_MARKERS):
        optimized += LOCALITY_SUFFIX
    return optimized


def generate_focus_keyphrase(keywords: list[KeywordCandidate], posting: JobPosting) -> str:
    """Join the top three keyword terms, with the location as a fallback term.

    The location is appended after the top terms and the sequence is then
    cut back to three, so it only survives when fewer than three keywords
    were extracted.
    """
    terms = [k.term for k in keywords[:FOCUS_KEYPHRASE_TERMS]]

    location = _NON_WORD_RE.sub("", (posting.location or "").lower()).strip()
    if location and location not in terms:
        terms.append(location)

    return " ".join(terms[:FOCUS_KEYPHRASE_TERMS])


def generate_meta_description(posting: JobPosting) -> str:
    """Build a search-result summary, hard-capped at 160 characters."""
    company = posting.company or DEFAULT_COMPANY
    location = posting.location or DEFAULT_LOCATION
    job_type = posting.job_type or DEFAULT_JOB_TYPE

    description = f"Join {company} as a {posting.title} in {location}. "
    if posting.salary:
        description += f"Competitive salary {posting.salary}. "
    description += f"Apply now for this exciting {job_type} opportunity."

    if len(description) > META_DESCRIPTION_MAX:
        description = description[: META_DESCRIPTION_MAX - len(ELLIPSIS)] + ELLIPSIS
    return description
