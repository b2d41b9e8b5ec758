import random

import pytest


class FixedRandom(random.Random):
    """random.Random whose random() always returns the same value."""

    def __init__(self, value: float):
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def fixed_rng():
    return FixedRandom


SAMPLE_RESUME = """Jane Doe
Senior Software Engineer

Experience
Built python3 services and docker images for analytics pipelines.
Led migration to PostgreSQL.
"""

SAMPLE_JOB = "We need python, docker and kubernetes experience."


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_job() -> str:
    return SAMPLE_JOB
