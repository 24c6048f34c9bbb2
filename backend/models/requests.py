from pydantic import BaseModel, Field


class ConfigurationRequest(BaseModel):
    key: str = Field(..., min_length=1, max_length=100)
    value: str
    description: str | None = None


class ConfigurationUpdateRequest(BaseModel):
    value: str = Field(..., min_length=1)


class WordPressCredentialsRequest(BaseModel):
    site_url: str = Field(..., min_length=1, description="Base URL of the WordPress site")
    username: str = Field(..., min_length=1)
    application_password: str = Field(..., min_length=1)
