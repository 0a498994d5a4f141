"""Entry points: jobs recommended for a user, applicants suggested for a job.

Pipeline per subject:
1. Expand the user's declared skills through the taxonomy
2. Score skills/bio against the job's requirements/title/description
3. Add the application-count term (job recommendation only)
4. Apply the recency multiplier for recently active users
5. Gate, sort, truncate
"""

import logging
from datetime import datetime

from config import settings
from models.records import Candidate, JobTarget
from models.responses import ApplicantMatch, JobRecommendation, MatchEnvelope
from services.errors import DataAccessError, RecordNotFoundError
from services.ranking import RankedMatch, final_score, passes_gate, rank
from services.similarity import TermWeighter, score_match
from services.skill_taxonomy import expand_skills
from services.store import RecordStore

logger = logging.getLogger(__name__)


def _to_applicant(item: RankedMatch[Candidate]) -> ApplicantMatch:
    user = item.subject
    return ApplicantMatch(
        id=user.id,
        fullname=user.fullname,
        email=user.email if user.is_public else None,
        skills=user.skills,
        bio=user.bio,
        is_public=user.is_public,
        matched_skills=item.matched_skills,
        score=item.score,
    )


def _to_recommendation(item: RankedMatch[JobTarget]) -> JobRecommendation:
    job = item.subject
    description = [line.strip() for line in job.description.split("\n") if line.strip()]
    return JobRecommendation(
        id=job.id,
        title=job.title,
        description=description,
        requirements=job.requirements,
        salary=job.salary,
        experience_level=job.experience_level,
        location=job.location,
        job_type=job.job_type,
        position=job.position,
        company=job.company,
        deadline=job.deadline.date().isoformat() if job.deadline else None,
        benefits=job.benefits,
        level=job.level,
        applications=job.applications,
        created_at=job.created_at,
        updated_at=job.updated_at,
        matched_skills=item.matched_skills,
        score=item.score,
    )


def rank_applicants(
    job: JobTarget,
    users: list[Candidate],
    top_n: int,
    now: datetime | None = None,
) -> list[RankedMatch[Candidate]]:
    """Rank candidate users against one job."""
    scored: list[RankedMatch[Candidate]] = []
    for user in users:
        match = score_match(
            expand_skills(user.skills),
            job.requirements,
            job.title,
            user.bio,
            job.description,
        )
        score = final_score(match, user.last_activity_at, now=now)
        if passes_gate(match, score):
            scored.append(RankedMatch(user, match.matched, score))

    logger.debug("Job %s: %d of %d users passed the gate", job.id, len(scored), len(users))
    return rank(scored, top_n)


def rank_jobs(
    user: Candidate,
    jobs: list[JobTarget],
    top_n: int,
    now: datetime | None = None,
) -> list[RankedMatch[JobTarget]]:
    """Rank jobs for one user."""
    skills = expand_skills(user.skills)
    # One bio, many descriptions: build the term table once
    weighter = TermWeighter(user.bio or "")
    scored: list[RankedMatch[JobTarget]] = []
    for job in jobs:
        match = score_match(
            skills, job.requirements, job.title, user.bio, job.description, weighter
        )
        score = final_score(
            match,
            user.last_activity_at,
            applications=len(job.applications),
            now=now,
        )
        if passes_gate(match, score):
            scored.append(RankedMatch(job, match.matched, score))

    logger.debug("User %s: %d of %d jobs passed the gate", user.id, len(scored), len(jobs))
    return rank(scored, top_n)


def find_potential_applicants_for_job(
    store: RecordStore,
    job: JobTarget,
    top_n: int | None = None,
    now: datetime | None = None,
) -> MatchEnvelope[ApplicantMatch]:
    """Suggest job-seeking users for a job."""
    if top_n is None:
        top_n = settings.default_top_n_applicants

    try:
        users = store.list_job_seekers()
    except DataAccessError:
        logger.exception("Failed to load job seekers for job %s", job.id)
        raise

    if not users:
        return MatchEnvelope[ApplicantMatch](message="No applicants are looking for a job", data=[])

    ranked = rank_applicants(job, users, top_n, now=now)
    logger.info("Job %s: %d potential applicants", job.id, len(ranked))
    return MatchEnvelope[ApplicantMatch](
        message="Potential applicants found success" if ranked else "Potential applicants not found",
        data=[_to_applicant(item) for item in ranked],
    )


def recommend_jobs_for_user(
    store: RecordStore,
    user_id: str,
    top_n: int | None = None,
    now: datetime | None = None,
) -> MatchEnvelope[JobRecommendation]:
    """Recommend open jobs for a user.

    Raises RecordNotFoundError for an unknown user.
    """
    if top_n is None:
        top_n = settings.default_top_n_jobs

    try:
        user = store.get_user(user_id)
    except DataAccessError:
        logger.exception("Failed to load user %s", user_id)
        raise
    if user is None:
        raise RecordNotFoundError("No user found")

    if not user.is_find_job:
        return MatchEnvelope[JobRecommendation](message="User is not looking for a job", data=[])

    try:
        jobs = store.list_open_jobs(now)
    except DataAccessError:
        logger.exception("Failed to load open jobs for user %s", user_id)
        raise

    if not jobs:
        return MatchEnvelope[JobRecommendation](message="No jobs available", data=[])

    ranked = rank_jobs(user, jobs, top_n, now=now)
    logger.info("User %s: %d recommended jobs", user_id, len(ranked))
    return MatchEnvelope[JobRecommendation](
        message="Recommended jobs found success" if ranked else "Recommended jobs not found",
        data=[_to_recommendation(item) for item in ranked],
    )
