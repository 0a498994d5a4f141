from pydantic import BaseModel, Field


class PotentialApplicantsRequest(BaseModel):
    title: str = Field(..., max_length=200, description="Job title")
    description: str = Field("", max_length=10000, description="Job description text")
    requirements: list[str] = Field(default_factory=list, max_length=100)
    top_n: int | None = Field(None, ge=1, description="Number of applicants to return")
