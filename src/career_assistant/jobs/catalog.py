"""Bundled job listings ranked by overlap with the profile's skills."""

from __future__ import annotations

from collections.abc import Sequence

from career_assistant.models.job import Job
from career_assistant.models.profile import UserProfile

SAMPLE_JOBS: list[Job] = [
    Job(
        id="1",
        title="Frontend Engineer",
        company="TechFlow Solutions",
        location="Bangalore (Remote)",
        type="Full-time",
        salary="₹8L - ₹12L",
        posted="2 days ago",
        skills_required=["React", "TypeScript", "Tailwind", "Redux"],
        description=(
            "We are looking for a passionate Frontend Engineer to build modern "
            "web applications using React and TypeScript."
        ),
    ),
    Job(
        id="2",
        title="Junior Data Analyst",
        company="DataWiz Corp",
        location="Mumbai",
        type="Hybrid",
        salary="₹5L - ₹8L",
        posted="1 day ago",
        skills_required=["Python", "SQL", "Excel", "Tableau"],
        description=(
            "Analyze large datasets to extract meaningful insights. "
            "Proficiency in Python and SQL is mandatory."
        ),
    ),
    Job(
        id="3",
        title="Backend Developer",
        company="CloudNine Systems",
        location="Hyderabad",
        type="On-site",
        salary="₹10L - ₹15L",
        posted="3 days ago",
        skills_required=["Node.js", "MongoDB", "AWS", "Express"],
        description=(
            "Build scalable APIs and microservices. Experience with AWS and "
            "NoSQL databases is a plus."
        ),
    ),
    Job(
        id="4",
        title="Product Design Intern",
        company="Creative Hub",
        location="Delhi",
        type="Internship",
        salary="₹15k/month",
        posted="Just now",
        skills_required=["Figma", "UI/UX", "Prototyping"],
        description=(
            "Assist in designing user interfaces for mobile and web apps. "
            "Must have a strong portfolio."
        ),
    ),
]


def match_score(job_skills: Sequence[str], profile_skills: Sequence[str]) -> int:
    """Percentage of job skills covered by the profile.

    A job skill counts as matched when it and a profile skill contain one
    another, case-insensitively.
    """
    if not profile_skills or not job_skills:
        return 0
    mine = [s.lower() for s in profile_skills if s]
    matched = [
        skill
        for skill in job_skills
        if any(s in skill.lower() or skill.lower() in s for s in mine)
    ]
    return round(len(matched) / len(job_skills) * 100)


def recommend(
    profile: UserProfile,
    query: str = "",
    jobs: Sequence[Job] = SAMPLE_JOBS,
) -> list[Job]:
    """Filter jobs by title/company and sort by match score, best first."""
    needle = query.strip().lower()
    scored = [
        job.model_copy(update={"match_score": match_score(job.skills_required, profile.skills)})
        for job in jobs
        if needle in job.title.lower() or needle in job.company.lower()
    ]
    return sorted(scored, key=lambda job: job.match_score, reverse=True)
