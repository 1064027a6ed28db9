from __future__ import annotations

import random
from unittest.mock import MagicMock

import pytest

from talentscreen.interview import InterviewSession, LocalQuestionStrategy, QuestionGenerator
from talentscreen.models import JobDescription
from talentscreen.voice import SpeechSynthesizer

RESUME = (
    "Backend developer working with Python and SQL for five years.\n"
    "Maintained reporting pipelines for the finance team.\n"
    "Mentored two junior engineers. Enjoys hiking."
)


def long_answer(core: str, filler_words: int = 50) -> str:
    """An answer of at least `filler_words` words built around `core`."""
    return core + " " + " ".join(["detail"] * filler_words)


@pytest.fixture
def job() -> JobDescription:
    return JobDescription.from_record(
        {
            "title": "Backend Engineer",
            "skills": "Python, SQL, Docker",
            "experience": "3+ years",
            "description": "Build and operate our data APIs.",
        }
    )


@pytest.fixture
def resume() -> str:
    return RESUME


@pytest.fixture
def local_generator() -> QuestionGenerator:
    return QuestionGenerator(strategies=[LocalQuestionStrategy(rng=random.Random(7))])


@pytest.fixture
def synthesizer():
    return MagicMock(spec=SpeechSynthesizer)


@pytest.fixture
def session(job, resume, local_generator, synthesizer) -> InterviewSession:
    return InterviewSession(
        job,
        resume,
        candidate_name="Jane Doe",
        question_generator=local_generator,
        synthesizer=synthesizer,
    )
