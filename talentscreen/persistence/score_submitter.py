"""
Score submission to the external persistence collaborator.

A single fire-and-confirm POST of {"score": int}. Failures are raised as
PersistenceError and never retried here; the caller keeps the result and
may resubmit.
"""
from typing import Dict, Optional

import requests

from ..errors import PersistenceError
from ..models import AssessmentResult
from ..utils.config import SCORE_SERVICE_TIMEOUT, SCORE_SERVICE_URL
from ..utils.logger import setup_logger

logger = setup_logger("score_submitter")


class ScoreSubmitter:
    """
    Posts composite scores to the save-score endpoint.

    The candidate identity travels with the authenticated session: pass the
    session cookies (or headers) the external session layer issued.
    """

    def __init__(
        self,
        url: str = SCORE_SERVICE_URL,
        timeout: float = SCORE_SERVICE_TIMEOUT,
        cookies: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None
    ):
        self.url = url
        self.timeout = timeout
        self.cookies = cookies or {}
        self.headers = headers or {}

    def submit_score(self, score: int) -> None:
        """
        Submit a composite score.

        Raises:
            PersistenceError: On network failure or a non-2xx response
        """
        if not 0 <= score <= 100:
            raise ValueError(f"Score must be within 0-100, got {score}")

        try:
            response = requests.post(
                self.url,
                json={"score": score},
                headers=self.headers,
                cookies=self.cookies,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Score submission failed: {e}")
            raise PersistenceError(f"Error saving result: {e}", score=score) from e

        if not response.ok:
            logger.error(f"Score submission rejected: HTTP {response.status_code}")
            raise PersistenceError(
                f"Error saving result: HTTP {response.status_code}",
                score=score,
                status_code=response.status_code
            )

        logger.info(f"Score {score} saved")

    def submit(self, result: AssessmentResult) -> None:
        """Submit a result's composite score."""
        logger.info(f"Submitting assessment {result.id} for {result.candidate_name}")
        self.submit_score(result.composite_score)
