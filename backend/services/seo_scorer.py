"""SEO quality score and recommendation rubric for job postings.

Both the score and the recommendations are built from ordered lists of
independent checks. Every check is evaluated on every call; the order of
RECOMMENDATION_CHECKS is the order recommendations are reported in.
"""

from collections.abc import Callable
from typing import NamedTuple

from models.schemas.job_posting import JobPosting
from models.schemas.keyword_candidate import KeywordCandidate

BASE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100

TITLE_LENGTH_RANGE = (10, 60)
DESCRIPTION_LENGTH_RANGE = (150, 2000)
TOP_KEYWORD_FREQUENCY_RANGE = (2, 5)
REVIEW_THRESHOLD = 70


def _within(value: int, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    return low <= value <= high


class ScoreRule(NamedTuple):
    name: str
    applies: Callable[[JobPosting, list[KeywordCandidate]], bool]
    bonus: int


SCORE_RULES: tuple[ScoreRule, ...] = (
    ScoreRule(
        "title_length",
        lambda p, kws: bool(p.title) and _within(len(p.title), TITLE_LENGTH_RANGE),
        10,
    ),
    ScoreRule(
        "description_length",
        lambda p, kws: bool(p.description) and _within(len(p.description), DESCRIPTION_LENGTH_RANGE),
        10,
    ),
    ScoreRule(
        "keyword_density",
        lambda p, kws: bool(kws) and _within(kws[0].frequency, TOP_KEYWORD_FREQUENCY_RANGE),
        10,
    ),
    ScoreRule("company", lambda p, kws: bool(p.company), 5),
    ScoreRule("location", lambda p, kws: bool(p.location), 5),
    ScoreRule("job_type", lambda p, kws: bool(p.job_type), 5),
    ScoreRule("category", lambda p, kws: bool(p.category), 5),
    ScoreRule("existing_focus_keyphrase", lambda p, kws: bool(p.focus_keyphrase), 10),
    ScoreRule("existing_meta_description", lambda p, kws: bool(p.meta_description), 10),
)


def calculate_seo_score(
    posting: JobPosting,
    keywords: list[KeywordCandidate],
    focus_keyphrase: str = "",
) -> int:
    """Score 0-100: base 50 plus every satisfied rule, clamped.

    All rules together add 60, so a complete posting is clamped at 100.
    The focus keyphrase is accepted for interface symmetry and does not
    contribute; only a keyphrase already stored on the posting counts.
    """
    score = BASE_SCORE
    for rule in SCORE_RULES:
        if rule.applies(posting, keywords):
            score += rule.bonus
    return min(MAX_SCORE, max(MIN_SCORE, score))


class RecommendationCheck(NamedTuple):
    name: str
    fails: Callable[[JobPosting, int, list[KeywordCandidate]], bool]
    message: Callable[[JobPosting, int, list[KeywordCandidate]], str]


def _const(text: str) -> Callable[[JobPosting, int, list[KeywordCandidate]], str]:
    return lambda p, score, kws: text


RECOMMENDATION_CHECKS: tuple[RecommendationCheck, ...] = (
    RecommendationCheck(
        "title_too_short",
        lambda p, score, kws: not p.title or len(p.title) < TITLE_LENGTH_RANGE[0],
        _const("Improve job title - should be 10-60 characters long"),
    ),
    RecommendationCheck(
        "description_too_short",
        lambda p, score, kws: not p.description or len(p.description) < DESCRIPTION_LENGTH_RANGE[0],
        _const("Add more detailed job description (minimum 150 characters)"),
    ),
    RecommendationCheck(
        "missing_company",
        lambda p, score, kws: not p.company,
        _const("Add company name for better credibility"),
    ),
    RecommendationCheck(
        "missing_location",
        lambda p, score, kws: not p.location,
        _const("Specify job location for better local SEO"),
    ),
    RecommendationCheck(
        "missing_focus_keyphrase",
        lambda p, score, kws: not p.focus_keyphrase,
        _const("Add focus keyphrase for better search ranking"),
    ),
    RecommendationCheck(
        "missing_meta_description",
        lambda p, score, kws: not p.meta_description,
        _const("Create compelling meta description to improve click-through rate"),
    ),
    RecommendationCheck(
        "low_keyword_frequency",
        lambda p, score, kws: bool(kws) and kws[0].frequency < TOP_KEYWORD_FREQUENCY_RANGE[0],
        lambda p, score, kws: f'Include "{kws[0].term}" more frequently in the description',
    ),
    RecommendationCheck(
        "overall_review",
        lambda p, score, kws: score < REVIEW_THRESHOLD,
        _const("Overall SEO optimization needed - consider professional review"),
    ),
)


def generate_recommendations(
    posting: JobPosting, score: int, keywords: list[KeywordCandidate]
) -> list[str]:
    """Return one message per failing check, in check order."""
    return [
        check.message(posting, score, keywords)
        for check in RECOMMENDATION_CHECKS
        if check.fails(posting, score, keywords)
    ]
