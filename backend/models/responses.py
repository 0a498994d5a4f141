from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel

from models.records import CompanyInfo

T = TypeVar("T")


class ApplicantMatch(BaseModel):
    id: str
    fullname: str
    email: str | None = None
    skills: list[str] = []
    bio: str | None = None
    is_public: bool = False
    matched_skills: list[str] = []
    score: float = 0.0


class JobRecommendation(BaseModel):
    id: str
    title: str
    description: list[str] = []  # trimmed non-empty lines
    requirements: list[str] = []
    salary: float | None = None
    experience_level: int | None = None
    location: str = ""
    job_type: str = ""
    position: int | None = None
    company: CompanyInfo | None = None
    deadline: str | None = None  # YYYY-MM-DD
    benefits: list[str] = []
    level: str = ""
    applications: list[str] = []
    created_at: datetime | None = None
    updated_at: datetime | None = None
    matched_skills: list[str] = []
    score: float = 0.0


class MatchEnvelope(BaseModel, Generic[T]):
    """Uniform response: empty data with a message when nothing matched."""
    message: str
    success: bool = True
    data: list[T] = []


class HealthResponse(BaseModel):
    status: str = "ok"
    users: int = 0
    jobs: int = 0
    taxonomy_size: int = 0
