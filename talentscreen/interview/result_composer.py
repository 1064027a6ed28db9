"""
Result Composer for the screening interview.

Blends the resume skill match with the average answer quality into the final
composite score and status, after redeeming weaknesses that the candidate
evidenced in their answers.
"""
import random
import string
from datetime import datetime
from typing import Iterable, Optional, Sequence

from ..errors import InvalidAnswerError, NoAnswersError
from ..models import AnswerScore, AssessmentResult, AssessmentStatus, SkillAnalysis
from ..utils.config import ANSWER_WEIGHT, RESUME_WEIGHT, SELECTION_THRESHOLD
from ..utils.logger import setup_logger
from ..utils.numbers import clamp, round_half_up

logger = setup_logger("result_composer")

_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_result_id(rng: Optional[random.Random] = None) -> str:
    """Short random result identifier, e.g. "id_k3f9a0z"."""
    rng = rng or random.Random()
    return "id_" + "".join(rng.choice(_ID_ALPHABET) for _ in range(7))


def default_candidate_name(now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return f"Candidate {now.strftime('%Y-%m-%d %H:%M:%S')}"


def redeem_weaknesses(analysis: SkillAnalysis, answers: Iterable[str]) -> SkillAnalysis:
    """
    Promote every weakness mentioned in any answer to a strength.

    Evaluated once against the full answer set.
    """
    answers_lower = [(a or "").lower() for a in answers]
    redeemed = [
        skill for skill in analysis.weaknesses
        if any(skill.lower() in a for a in answers_lower)
    ]
    if redeemed:
        logger.info(f"Weaknesses redeemed by answers: {redeemed}")
    return analysis.promote(redeemed)


class ResultComposer:
    """Builds the terminal AssessmentResult for a candidate session."""

    def __init__(
        self,
        resume_weight: float = RESUME_WEIGHT,
        answer_weight: float = ANSWER_WEIGHT,
        selection_threshold: int = SELECTION_THRESHOLD
    ):
        self.resume_weight = resume_weight
        self.answer_weight = answer_weight
        self.selection_threshold = selection_threshold

    def answer_quality(self, answer_scores: Sequence[AnswerScore]) -> int:
        """Rounded mean of the answer scores."""
        if not answer_scores:
            raise NoAnswersError("Cannot compose a result without answers")
        return round_half_up(sum(s.score for s in answer_scores) / len(answer_scores))

    def composite(self, resume_percent: int, answer_quality: int) -> int:
        value = self.resume_weight * resume_percent + self.answer_weight * answer_quality
        return int(clamp(round_half_up(value)))

    def status_for(self, composite_score: int) -> AssessmentStatus:
        if composite_score > self.selection_threshold:
            return AssessmentStatus.SELECTED
        return AssessmentStatus.REJECTED

    def compose(
        self,
        analysis: SkillAnalysis,
        questions: Sequence[str],
        answers: Sequence[str],
        answer_scores: Sequence[AnswerScore],
        candidate_name: Optional[str] = None,
        result_id: Optional[str] = None,
        timestamp: Optional[datetime] = None
    ) -> AssessmentResult:
        """
        Compose the final assessment.

        Args:
            analysis: Resume skill analysis
            questions: Questions asked, in order
            answers: Final answer texts, one per question
            answer_scores: Scores for each answer, in order
            candidate_name: Display name; defaults to "Candidate <timestamp>"
            result_id: Result identifier; generated when omitted
            timestamp: Completion time; defaults to now

        Returns:
            Immutable AssessmentResult

        Raises:
            NoAnswersError: If there are no answers
            InvalidAnswerError: If questions, answers and scores differ in length
        """
        if not answers or not answer_scores:
            logger.error("Attempted to compose a result with no answers")
            raise NoAnswersError("Cannot compose a result without answers")
        if not len(questions) == len(answers) == len(answer_scores):
            raise InvalidAnswerError(
                f"Mismatched interview: {len(questions)} questions, {len(answers)} answers, "
                f"{len(answer_scores)} scores"
            )

        timestamp = timestamp or datetime.now()
        quality = self.answer_quality(answer_scores)
        composite = self.composite(analysis.percent, quality)
        final = redeem_weaknesses(analysis, answers)
        status = self.status_for(composite)

        result = AssessmentResult(
            id=result_id or generate_result_id(),
            candidate_name=(candidate_name or "").strip() or default_candidate_name(timestamp),
            resume_match_percent=analysis.percent,
            answer_quality_percent=quality,
            composite_score=composite,
            strengths=tuple(final.strengths),
            weaknesses=tuple(final.weaknesses),
            answers=tuple(answers),
            answer_scores=tuple(answer_scores),
            questions=tuple(questions),
            timestamp=timestamp.isoformat(),
            status=status,
        )

        logger.info(
            f"Assessment {result.id} for {result.candidate_name}: composite {composite} "
            f"(resume {analysis.percent}, answers {quality}) -> {status.value}"
        )
        return result
