"""SEO engine entry points.

Pipeline (every stage pure, no I/O):
1. Keyword extraction over title + description + company + location
2. Title normalization
3. Focus keyphrase from top keywords and location
4. Meta description
5. Score
6. Recommendations from score gaps
7. (optimize only) Section detection and HTML re-assembly of the body
"""

import logging

from models.responses import AnalysisResult, OptimizationResult
from models.schemas.job_posting import JobPosting
from services.content_assembler import restructure_content
from services.keyword_extractor import extract_posting_keywords
from services.seo_metadata import (
    generate_focus_keyphrase,
    generate_meta_description,
    optimize_title,
)
from services.seo_scorer import calculate_seo_score, generate_recommendations

logger = logging.getLogger(__name__)


def analyze(posting: JobPosting) -> AnalysisResult:
    """Score a posting and derive its SEO metadata. Does not mutate the posting."""
    keywords = extract_posting_keywords(posting)
    focus_keyphrase = generate_focus_keyphrase(keywords, posting)
    meta_description = generate_meta_description(posting)
    optimized_title = optimize_title(posting.title)

    score = calculate_seo_score(posting, keywords, focus_keyphrase)
    recommendations = generate_recommendations(posting, score, keywords)

    logger.debug("Analyzed %r: score=%d, %d recommendations", posting.title, score, len(recommendations))
    return AnalysisResult(
        score=score,
        recommendations=recommendations,
        focus_keyphrase=focus_keyphrase,
        meta_description=meta_description,
        optimized_title=optimized_title,
    )


def optimize(posting: JobPosting) -> OptimizationResult:
    """Run analyze() and additionally restructure the posting body."""
    analysis = analyze(posting)
    return OptimizationResult(
        score=analysis.score,
        recommendations=analysis.recommendations,
        focus_keyphrase=analysis.focus_keyphrase or "",
        meta_description=analysis.meta_description or "",
        optimized_title=analysis.optimized_title or posting.title,
        optimized_content=restructure_content(posting),
    )
