"""Tests for the analyze / optimize entry points."""

from models.responses import AnalysisResult, OptimizationResult
from models.schemas.job_posting import JobPosting
from services.seo_analyzer import analyze, optimize


class TestAnalyze:
    def test_complete_posting_is_clamped(self, full_posting):
        result = analyze(full_posting)
        assert isinstance(result, AnalysisResult)
        assert result.score == 100
        assert result.recommendations == []
        assert result.optimized_title == "Registered Nurse - Cape Town"

    def test_sparse_posting_recommendations_in_check_order(self):
        posting = JobPosting(title="Registered Nurse", description="Caring person needed for a small clinic.")
        result = analyze(posting)
        assert result.score == 60
        assert result.recommendations == [
            "Add more detailed job description (minimum 150 characters)",
            "Add company name for better credibility",
            "Specify job location for better local SEO",
            "Add focus keyphrase for better search ranking",
            "Create compelling meta description to improve click-through rate",
            'Include "clinic" more frequently in the description',
            "Overall SEO optimization needed - consider professional review",
        ]

    def test_derived_metadata(self):
        posting = JobPosting(title="Registered Nurse", description="Caring person needed for a small clinic.")
        result = analyze(posting)
        # clinic is boosted; the rest tie and keep source order
        assert result.focus_keyphrase == "clinic registered nurse"
        assert result.meta_description == (
            "Join Leading company as a Registered Nurse in South Africa. "
            "Apply now for this exciting position opportunity."
        )
        assert result.optimized_title == "Registered Nurse - South Africa"

    def test_does_not_mutate_posting(self, full_posting):
        before = full_posting.model_dump()
        analyze(full_posting)
        optimize(full_posting)
        assert full_posting.model_dump() == before

    def test_score_always_in_range(self):
        postings = [
            JobPosting(title="x", description=""),
            JobPosting(title="Registered Nurse", description="nurse " * 400),
            JobPosting(title="A" * 100, description="b" * 100, company="c", location="d"),
        ]
        for posting in postings:
            assert 0 <= analyze(posting).score <= 100


class TestOptimize:
    def test_returns_all_fields(self, full_posting):
        result = optimize(full_posting)
        assert isinstance(result, OptimizationResult)
        assert result.score == analyze(full_posting).score
        assert result.focus_keyphrase
        assert len(result.meta_description) <= 160
        assert result.optimized_content.startswith("<h2>")

    def test_empty_description_is_well_formed(self):
        result = optimize(JobPosting(title="Cleaner", description=""))
        assert result.optimized_content == ""
        assert result.optimized_title == "Cleaner - South Africa"
        assert result.focus_keyphrase == "cleaner"
        assert 0 <= result.score <= 100

    def test_accepts_camel_case_payload(self):
        posting = JobPosting.model_validate({
            "title": "Bookkeeper",
            "description": "Small practice in Durban.",
            "jobType": "contract",
            "focusKeyphrase": "bookkeeper durban",
        })
        assert posting.job_type == "contract"
        result = optimize(posting)
        assert result.meta_description.endswith("exciting contract opportunity.")
