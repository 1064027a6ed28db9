"""
Question Generator for the screening interview.

Generates a fixed-size list of interview questions for a job and resume.
Strategies are tried in order until one produces questions:

- RemoteQuestionStrategy: POSTs a prompt to the question generation service
- LLMQuestionStrategy: asks a Groq-hosted model (only when a key is configured)
- LocalQuestionStrategy: deterministic templates from skills, title and resume

The caller never sees which strategy answered, only the questions or an
EmptyResultError when every strategy came back empty.
"""
import json
import random
from typing import Any, List, Optional, Sequence

import requests

from ..errors import EmptyResultError, RemoteServiceError
from ..models import JobDescription
from ..utils.config import (
    QUESTION_COUNT,
    QUESTION_SERVICE_API_KEY,
    QUESTION_SERVICE_TIMEOUT,
    QUESTION_SERVICE_URL,
    RESUME_FOLLOWUP_SEGMENTS
)
from ..utils.logger import setup_logger
from ..utils.text_utils import prepare_resume_text, split_segments

logger = setup_logger("question_generator")


def build_prompt(job: JobDescription, resume: str, num_questions: int) -> str:
    """Compose the question generation prompt shared by the remote strategies."""
    return (
        f"Generate {num_questions} interview questions tailored to this job and candidate:\n\n"
        f"JOB: {job.title}\n"
        f"SKILLS: {job.skills_text}\n"
        f"DESCRIPTION: {job.description}\n\n"
        f"RESUME: {prepare_resume_text(resume)}\n\n"
        "Return a JSON array of question strings."
    )


def parse_question_payload(data: Any) -> List[str]:
    """
    Extract questions from a decoded service response.

    Accepts a bare JSON array of strings or an object with a "questions" array.

    Raises:
        RemoteServiceError: For any other shape, or an array with no usable strings
    """
    if isinstance(data, dict):
        data = data.get("questions")
    if not isinstance(data, list):
        raise RemoteServiceError("Response is not a JSON array of questions")
    if not all(isinstance(q, str) for q in data):
        raise RemoteServiceError("Response contains non-string questions")

    questions = [q.strip() for q in data if q.strip()]
    if not questions:
        raise RemoteServiceError("Response contains no questions")
    return questions


class QuestionStrategy:
    """A single way of producing interview questions."""

    name = "base"

    def generate(self, job: JobDescription, resume: str, num_questions: int) -> List[str]:
        raise NotImplementedError


class RemoteQuestionStrategy(QuestionStrategy):
    """Calls the remote question generation service with a bearer credential."""

    name = "remote"

    def __init__(
        self,
        api_key: Optional[str] = None,
        url: str = QUESTION_SERVICE_URL,
        timeout: float = QUESTION_SERVICE_TIMEOUT
    ):
        self.api_key = api_key or QUESTION_SERVICE_API_KEY
        self.url = url
        self.timeout = timeout

    def generate(self, job: JobDescription, resume: str, num_questions: int) -> List[str]:
        if not self.api_key:
            raise RemoteServiceError("No API credential for the question service")

        payload = {
            "prompt": build_prompt(job, resume, num_questions),
            "max_questions": num_questions
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}"
        }

        try:
            response = requests.post(self.url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise RemoteServiceError(f"Question service request failed: {e}") from e

        if not response.ok:
            raise RemoteServiceError(f"Question service returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteServiceError(f"Question service returned invalid JSON: {e}") from e

        return parse_question_payload(data)


class LLMQuestionStrategy(QuestionStrategy):
    """Drafts questions with a LangChain chat model (Groq by default)."""

    name = "llm"

    def __init__(self, llm=None):
        self.llm = llm
        self._chain = None

    def _get_chain(self):
        """Get or create the question chain."""
        if self._chain is None:
            from ..llm.groq_service import create_question_chain, initialize_llm

            if self.llm is None:
                self.llm = initialize_llm()
            self._chain = create_question_chain(self.llm)
        return self._chain

    def generate(self, job: JobDescription, resume: str, num_questions: int) -> List[str]:
        try:
            result = self._get_chain().invoke({"prompt": build_prompt(job, resume, num_questions)})
        except Exception as e:
            raise RemoteServiceError(f"LLM question generation failed: {e}") from e

        text = result.get("questions", "")
        if not isinstance(text, str):
            text = getattr(text, "content", str(text))

        start, end = text.find("["), text.rfind("]")
        if start == -1 or end < start:
            raise RemoteServiceError("LLM output contains no JSON array")
        try:
            data = json.loads(text[start:end + 1])
        except ValueError as e:
            raise RemoteServiceError(f"LLM output is not valid JSON: {e}") from e

        return parse_question_payload(data)


class LocalQuestionStrategy(QuestionStrategy):
    """
    Deterministic template-based questions.

    The pool holds two questions per job skill, three behavioral questions and
    one follow-up per leading resume segment. It is shuffled and truncated to
    the requested count; a smaller pool is returned whole.
    """

    name = "local"

    def __init__(self, rng: Optional[random.Random] = None, resume_segments: int = RESUME_FOLLOWUP_SEGMENTS):
        self.rng = rng or random.Random()
        self.resume_segments = resume_segments

    def skill_questions(self, job: JobDescription) -> List[str]:
        questions = []
        for skill in job.skills:
            questions.append(f"Can you describe a project where you used {skill}? What challenges did you face?")
            questions.append(
                f"How do you approach learning and improving your {skill} skills? Give a concrete example."
            )
        return questions

    def behavioral_questions(self, job: JobDescription) -> List[str]:
        title = job.title or "this role"
        return [
            f"Why are you interested in the {title} position at our company?"
            if job.title else "Why are you interested in this position at our company?",
            f"Tell me about a time you resolved a difficult problem in a project relevant to {title}.",
            f"As a candidate for {title}, how do you ensure your work is accessible and performant?",
        ]

    def resume_questions(self, resume: str) -> List[str]:
        segments = split_segments(resume)[:self.resume_segments]
        return [f'You mentioned: "{s}". Could you expand on that experience?' for s in segments]

    def build_pool(self, job: JobDescription, resume: str) -> List[str]:
        return self.skill_questions(job) + self.behavioral_questions(job) + self.resume_questions(resume)

    def generate(self, job: JobDescription, resume: str, num_questions: int) -> List[str]:
        pool = self.build_pool(job, resume)
        self.rng.shuffle(pool)
        return pool[:num_questions]


def build_default_strategies(api_key: Optional[str] = None, llm=None) -> List[QuestionStrategy]:
    """
    Remote service first, the LLM when Groq is configured (or an llm is given),
    local templates last.
    """
    from ..llm.groq_service import groq_configured

    strategies: List[QuestionStrategy] = [RemoteQuestionStrategy(api_key=api_key)]
    if llm is not None or groq_configured():
        strategies.append(LLMQuestionStrategy(llm=llm))
    strategies.append(LocalQuestionStrategy())
    return strategies


class QuestionGenerator:
    """
    Produces the ordered question list for one interview.

    Strategies are tried in order; a RemoteServiceError moves on to the next
    strategy in the same call, it is never retried.
    """

    def __init__(
        self,
        strategies: Optional[Sequence[QuestionStrategy]] = None,
        num_questions: int = QUESTION_COUNT
    ):
        if strategies is None:
            strategies = build_default_strategies()
        self.strategies = list(strategies)
        self.num_questions = num_questions

        logger.info(
            "QuestionGenerator initialized with strategies: "
            + ", ".join(s.name for s in self.strategies)
        )

    def generate_questions(self, job: JobDescription, resume: str) -> List[str]:
        """
        Generate interview questions.

        Args:
            job: Job description
            resume: Candidate's resume text

        Returns:
            At most `num_questions` question strings

        Raises:
            EmptyResultError: If no strategy produced any question
        """
        for strategy in self.strategies:
            try:
                questions = strategy.generate(job, resume, self.num_questions)
            except RemoteServiceError as e:
                logger.warning(f"{strategy.name} question generation failed, falling back: {e}")
                continue

            if questions:
                logger.info(f"Generated {len(questions[:self.num_questions])} questions via {strategy.name}")
                return questions[:self.num_questions]

        logger.error("Question generation produced no questions")
        raise EmptyResultError("Unable to generate interview questions")
