from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_store
from config import settings
from models.records import JobTarget
from models.requests import PotentialApplicantsRequest
from models.responses import (
    ApplicantMatch,
    HealthResponse,
    JobRecommendation,
    MatchEnvelope,
)
from services import recommendation
from services.errors import RecordNotFoundError
from services.skill_taxonomy import get_taxonomy
from services.store import RecordStore

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _check_top_n(top_n: int | None) -> None:
    if top_n is not None and top_n > settings.max_top_n:
        raise HTTPException(
            status_code=400,
            detail=f"top_n too large (max {settings.max_top_n})",
        )


@router.get("/health", response_model=HealthResponse)
async def health(store: RecordStore = Depends(get_store)):
    users, jobs = store.count()
    return HealthResponse(users=users, jobs=jobs, taxonomy_size=len(get_taxonomy()))


@router.get(
    "/users/{user_id}/recommended-jobs",
    response_model=MatchEnvelope[JobRecommendation],
)
@limiter.limit(settings.rate_limit)
async def recommended_jobs(
    request: Request,
    user_id: str,
    top_n: int | None = Query(None, ge=1),
    store: RecordStore = Depends(get_store),
):
    _check_top_n(top_n)
    return recommendation.recommend_jobs_for_user(store, user_id, top_n)


@router.get(
    "/jobs/{job_id}/potential-applicants",
    response_model=MatchEnvelope[ApplicantMatch],
)
@limiter.limit(settings.rate_limit)
async def potential_applicants(
    request: Request,
    job_id: str,
    top_n: int | None = Query(None, ge=1),
    store: RecordStore = Depends(get_store),
):
    _check_top_n(top_n)
    job = store.get_job(job_id)
    if job is None:
        raise RecordNotFoundError("No job found")
    return recommendation.find_potential_applicants_for_job(store, job, top_n)


@router.post(
    "/match/potential-applicants",
    response_model=MatchEnvelope[ApplicantMatch],
)
@limiter.limit(settings.rate_limit)
async def match_potential_applicants(
    request: Request,
    body: PotentialApplicantsRequest,
    store: RecordStore = Depends(get_store),
):
    _check_top_n(body.top_n)
    job = JobTarget(
        id="adhoc",
        title=body.title,
        description=body.description,
        requirements=body.requirements,
    )
    return recommendation.find_potential_applicants_for_job(store, job, body.top_n)
