"""
Exception hierarchy for the assessment engine.

Malformed input fails fast with one of these; external-service failures are
raised as RemoteServiceError or PersistenceError so callers can degrade or retry.
"""
from typing import Optional


class AssessmentError(Exception):
    """Base class for every error raised by the assessment engine."""


class ConfigurationError(AssessmentError):
    """The job description cannot be assessed (e.g. it defines no skills)."""


class EmptyResultError(AssessmentError):
    """Question generation produced no questions."""


class NoAnswersError(AssessmentError):
    """A result was composed without any answers."""


class RemoteServiceError(AssessmentError):
    """A question generation strategy failed (network, timeout or payload)."""


class PersistenceError(AssessmentError):
    """
    Score submission failed.

    The unsent score is kept on the exception so the caller can resubmit it.
    """

    def __init__(self, message: str, score: Optional[int] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.score = score
        self.status_code = status_code


class SessionStateError(AssessmentError):
    """An interview session operation was called in the wrong state."""


class InvalidAnswerError(AssessmentError):
    """An answer was empty or referenced a question that does not exist."""


class EmptyResumeError(AssessmentError):
    """No resume text was supplied for analysis."""
