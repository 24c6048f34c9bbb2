"""Keyword extraction and domain relevance weighting for job postings.

Purely lexical: tokens are counted after stop-word filtering and boosted
when they overlap a curated table of role, industry and South African
locality terms. No stemming or tagging beyond substring containment.
"""

import logging
import re

from models.schemas.job_posting import JobPosting
from models.schemas.keyword_candidate import KeywordCandidate

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Domain keywords: role, locality and sector terms that earn a 2x boost.
# Matching is a symmetric substring test against the lowercase token, so
# "develop" is boosted by "developer" and "time" by "full time". Comparison is
# case-sensitive, so the uppercase "IT" entry never matches a token.
# ---------------------------------------------------------------------------
DOMAIN_KEYWORDS: tuple[str, ...] = (
    # Roles and seniority
    "healthcare", "software", "engineer", "manager", "analyst", "remote", "full time",
    "part time", "senior", "junior", "assistant", "director", "coordinator",
    # Locality
    "south africa", "cape town", "johannesburg", "durban", "pretoria",
    # Health
    "nursing", "pharmacy", "medical", "hospital", "clinic",
    # Technology
    "developer", "programmer", "technical", "IT", "technology",
    # Commerce and administration
    "marketing", "sales", "customer service", "administration",
    "finance", "accounting", "banking", "insurance",
    # Education
    "education", "teaching", "training", "academic",
    # Trades and operations
    "construction", "engineering", "maintenance", "operations",
)

STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "is", "are", "was", "were", "be", "been", "being", "have", "has", "had",
    "do", "does", "did", "will", "would", "should", "could", "can", "may", "might",
    "this", "that", "these", "those", "i", "you", "he", "she", "it", "we", "they",
})

DOMAIN_WEIGHT = 2.0
DEFAULT_WEIGHT = 1.0
MIN_TERM_LENGTH = 3
MAX_CANDIDATES = 20

_NON_WORD_RE = re.compile(r"[^\w\s]")


def calculate_relevance(term: str) -> float:
    """Return 2.0 if the term overlaps any domain keyword, else 1.0."""
    for keyword in DOMAIN_KEYWORDS:
        if term in keyword or keyword in term:
            return DOMAIN_WEIGHT
    return DEFAULT_WEIGHT


def tokenize(content: str) -> list[str]:
    """Split text into lowercase tokens, dropping short words and stop words."""
    words = _NON_WORD_RE.sub(" ", content.lower()).split()
    return [w for w in words if len(w) >= MIN_TERM_LENGTH and w not in STOP_WORDS]


def extract_keywords(content: str, top_n: int = MAX_CANDIDATES) -> list[KeywordCandidate]:
    """Rank keyword candidates by frequency x relevance, descending.

    Counts keep first-occurrence order and the sort is stable, so equally
    weighted terms rank in the order they first appear in the text.
    """
    frequency: dict[str, int] = {}
    for word in tokenize(content):
        frequency[word] = frequency.get(word, 0) + 1

    candidates = [
        KeywordCandidate(term=term, frequency=count, relevance=calculate_relevance(term))
        for term, count in frequency.items()
    ]
    candidates.sort(key=lambda c: c.weight, reverse=True)

    logger.debug("Extracted %d distinct terms, keeping %d", len(candidates), min(top_n, len(candidates)))
    return candidates[:top_n]


def posting_corpus(posting: JobPosting) -> str:
    """Combined text the keyword extractor runs over."""
    return (
        f"{posting.title} {posting.description} "
        f"{posting.company or ''} {posting.location or ''}"
    ).lower()


def extract_posting_keywords(posting: JobPosting) -> list[KeywordCandidate]:
    return extract_keywords(posting_corpus(posting))
