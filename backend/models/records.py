"""Input records read from the user and job collaborators.

Profile and posting fields are often stored as null; list fields read as
empty lists and text fields as empty strings so a sparse record scores low
instead of failing validation.
"""

from datetime import datetime

from pydantic import BaseModel, field_validator


class CompanyInfo(BaseModel):
    id: str
    name: str
    description: str = ""
    website: str = ""
    location: str = ""
    logo: str = ""

    @field_validator("description", "website", "location", "logo", mode="before")
    @classmethod
    def null_text_as_empty(cls, value):
        return "" if value is None else value


class Candidate(BaseModel):
    """A user profile as seen by the matching engine."""
    id: str
    fullname: str
    email: str | None = None  # exposed only when is_public
    skills: list[str] = []
    bio: str | None = None
    is_public: bool = False
    is_find_job: bool = True
    last_activity_at: datetime | None = None  # last time job seeking was toggled on

    @field_validator("skills", mode="before")
    @classmethod
    def null_skills_as_empty(cls, value):
        return [] if value is None else value


class JobTarget(BaseModel):
    """A job posting. Only title, description and requirements are scored."""
    id: str
    title: str
    description: str = ""
    requirements: list[str] = []

    # Display fields returned with a recommendation
    salary: float | None = None
    experience_level: int | None = None  # years
    location: str = ""
    job_type: str = ""  # Full-time, Part-time, Contract, Freelance, Internship
    position: int | None = None  # open seats
    company: CompanyInfo | None = None
    deadline: datetime | None = None
    benefits: list[str] = []
    level: str = ""  # Intern ... Director
    applications: list[str] = []  # application ids
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("requirements", "benefits", "applications", mode="before")
    @classmethod
    def null_list_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("description", "location", "job_type", "level", mode="before")
    @classmethod
    def null_text_as_empty(cls, value):
        return "" if value is None else value
