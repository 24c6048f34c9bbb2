"""Job posting as read from the posting store or submitted to the API."""

from pydantic import AliasChoices, BaseModel, Field, field_validator


class JobPosting(BaseModel):
    """A job listing: title, free-text body and optional structured metadata.

    Optional text fields that are empty or whitespace-only are stored as
    None, so "absent" has a single representation for the SEO engine.
    """
    title: str
    description: str
    company: str | None = None
    location: str | None = None
    job_type: str | None = Field(
        None, validation_alias=AliasChoices("job_type", "jobType")
    )
    category: str | None = None
    salary: str | None = None

    # SEO fields already present on the listing before optimization
    focus_keyphrase: str | None = Field(
        None, validation_alias=AliasChoices("focus_keyphrase", "focusKeyphrase")
    )
    meta_description: str | None = Field(
        None, validation_alias=AliasChoices("meta_description", "metaDescription")
    )
    seo_score: int | None = Field(
        None, validation_alias=AliasChoices("seo_score", "seoScore")
    )

    # Foreign id of the listing in the external content system
    wp_job_id: int | None = Field(
        None, validation_alias=AliasChoices("wp_job_id", "wpJobId")
    )

    @field_validator(
        "company",
        "location",
        "job_type",
        "category",
        "salary",
        "focus_keyphrase",
        "meta_description",
        mode="before",
    )
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value
