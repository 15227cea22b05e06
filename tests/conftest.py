"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from career_assistant.clients.llm_client import LLMClient
from career_assistant.models.generation import GenerationResult
from career_assistant.models.profile import Education, Experience, Project, UserProfile


@pytest.fixture
def sample_jd_text() -> str:
    return """Backend Engineer (3-5 years)

Responsibilities:
- Build and operate high-traffic REST APIs
- Design microservices on Kubernetes

Requirements:
- 3+ years of Python or Go
- PostgreSQL, Redis
- Experience with AWS

Nice to have:
- Kafka or other message queues
"""


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
jane@example.com | +91 98765 43210

Experience:
- Acme Corp (2021 - present) - Backend Developer
  - Built Django REST APIs serving 1M requests per day
  - Cut p95 latency by 40% with Redis caching

Education:
- B.Tech Computer Science, IIT Madras (2019)

Skills: Python, Django, PostgreSQL, Redis, Docker
"""


@pytest.fixture
def sample_profile() -> UserProfile:
    return UserProfile(
        name="Jane Doe",
        email="jane@example.com",
        phone="+91 98765 43210",
        target_role="Backend Engineer",
        education=[Education(degree="B.Tech CS", institution="IIT Madras", year="2019", score="8.9")],
        experience=[
            Experience(
                role="Backend Developer",
                company="Acme Corp",
                duration="2021 - present",
                description="Django REST APIs",
            )
        ],
        skills=["Python", "Django", "PostgreSQL", "Redis"],
        projects=[Project(title="Rate limiter", description="Token bucket service", tech_stack="Go, Redis")],
    )


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(return_value=GenerationResult(text="{}"))
    return client
