"""
Answer Scorer for the screening interview.

Grades a free-text answer on three independent rubrics:

- detail (0-30): answer length in words
- relevance (0-35): distinct strength skills mentioned in the answer
- specificity (0-35): quantified results and achievement verbs

The total is the sum, capped at 100. Each rubric contributes one feedback tag.
"""
import re
from typing import Iterable, List, Tuple

from ..models import AnswerScore
from ..utils.logger import setup_logger
from ..utils.text_utils import word_count

logger = setup_logger("answer_scorer")

# (minimum words, points, feedback), checked top-down
DETAIL_BUCKETS = [
    (50, 30, "✓ Excellent detail"),
    (30, 20, "• Good detail"),
    (15, 10, "• Moderate detail"),
    (0, 5, "◦ Brief answer"),
]

# (minimum distinct skills, points, feedback), checked top-down
RELEVANCE_BUCKETS = [
    (3, 35, "✓ Highly relevant to role"),
    (2, 28, "✓ Relevant to role"),
    (1, 18, "• Some relevance"),
]
GENERIC_RELEVANCE = (8, "• Generic but relevant")
NO_RELEVANCE = (0, "◦ Limited relevance")

# indexed by how many of (metrics, achievements) are present
SPECIFICITY_BUCKETS = [
    (10, "◦ Could be more specific"),
    (20, "• Some specificity"),
    (35, "✓ Specific & measured"),
]

EXPERIENCE_KEYWORDS = re.compile(
    r'\b(experience|project|built|developed|created|implemented|designed|managed|'
    r'learned|skilled|proficient|led)\b',
    re.IGNORECASE
)
METRIC_PATTERN = re.compile(r'\b\d+\s*(years?|months?|projects?|users?|%)', re.IGNORECASE)
ACHIEVEMENT_PATTERN = re.compile(
    r'\b(built|created|developed|implemented|successfully|achieved|led|managed)\b',
    re.IGNORECASE
)

MAX_SCORE = 100


class AnswerScorer:
    """Deterministic, side-effect-free grader for a single answer."""

    def score_detail(self, words: int) -> Tuple[int, str]:
        for minimum, points, feedback in DETAIL_BUCKETS:
            if words >= minimum:
                return points, feedback

    def score_relevance(self, answer_lower: str, strengths: Iterable[str]) -> Tuple[int, str, List[str]]:
        mentioned = []
        for skill in strengths:
            skill_lower = skill.lower()
            if skill_lower and skill_lower in answer_lower and skill not in mentioned:
                mentioned.append(skill)

        for minimum, points, feedback in RELEVANCE_BUCKETS:
            if len(mentioned) >= minimum:
                return points, feedback, mentioned

        if EXPERIENCE_KEYWORDS.search(answer_lower):
            points, feedback = GENERIC_RELEVANCE
        else:
            points, feedback = NO_RELEVANCE
        return points, feedback, mentioned

    def score_specificity(self, answer_lower: str) -> Tuple[int, str]:
        has_metrics = METRIC_PATTERN.search(answer_lower) is not None
        has_achievements = ACHIEVEMENT_PATTERN.search(answer_lower) is not None
        return SPECIFICITY_BUCKETS[int(has_metrics) + int(has_achievements)]

    def score_answer(
        self,
        answer: str,
        strengths: Iterable[str],
        question_index: int = 0
    ) -> AnswerScore:
        """
        Grade one answer.

        Args:
            answer: Answer text
            strengths: Skills the candidate was credited with
            question_index: Position of the answered question

        Returns:
            AnswerScore with the three sub-scores, total and feedback tags
        """
        answer = answer or ""
        answer_lower = answer.lower()
        words = word_count(answer)

        detail, detail_feedback = self.score_detail(words)
        relevance, relevance_feedback, mentioned = self.score_relevance(answer_lower, strengths)
        specificity, specificity_feedback = self.score_specificity(answer_lower)

        total = min(MAX_SCORE, detail + relevance + specificity)
        logger.debug(
            f"Answer {question_index}: {total} (detail={detail}, relevance={relevance}, "
            f"specificity={specificity}, words={words})"
        )

        return AnswerScore(
            question_index=question_index,
            score=total,
            word_count=words,
            detail=detail,
            relevance=relevance,
            specificity=specificity,
            skills_matched=tuple(mentioned),
            feedback=(detail_feedback, relevance_feedback, specificity_feedback),
        )

    def score_answers(self, answers: Iterable[str], strengths: Iterable[str]) -> List[AnswerScore]:
        """Grade every answer in order."""
        strengths = list(strengths)
        return [self.score_answer(text, strengths, i) for i, text in enumerate(answers)]
