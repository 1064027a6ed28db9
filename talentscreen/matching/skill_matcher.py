"""
Lexical resume-vs-job skill matching.

Each job skill is matched against the lower-cased resume text by the first rule
that applies, in order of precision:

1. the full skill phrase appears in the resume
2. the skill's first word (longer than two characters) appears in the resume
3. for multi-word skills, any constituent word appears in the resume
"""
from typing import Iterable, List, Optional, Sequence, Union

from ..errors import ConfigurationError
from ..models import JobDescription, SkillAnalysis, SkillStatus
from ..utils.config import FIRST_WORD_MIN_LENGTH, SKILL_MATCH_THRESHOLD
from ..utils.logger import setup_logger
from ..utils.numbers import round_half_up
from ..utils.text_utils import split_skills

logger = setup_logger("skill_matcher")

RULE_PHRASE = "phrase"
RULE_FIRST_WORD = "first_word"
RULE_ANY_WORD = "any_word"


def parse_skills(skills: Union[str, Iterable[str]]) -> List[str]:
    """
    Normalise job skills: trimmed, lower-cased, empty and repeated entries dropped.

    Args:
        skills: Comma-joined skill string or an iterable of skill strings

    Returns:
        Distinct skills in their original order
    """
    if isinstance(skills, str):
        raw = split_skills(skills)
    else:
        raw = [s for s in skills if s]

    seen = []
    for skill in raw:
        skill = skill.strip().lower()
        if skill and skill not in seen:
            seen.append(skill)
    return seen


class SkillMatcher:
    """
    Computes the skill overlap between a job description and a resume.

    The matcher is a pure function of its inputs; the only side effect is a
    DEBUG trace of every per-skill decision.
    """

    def __init__(
        self,
        threshold: int = SKILL_MATCH_THRESHOLD,
        first_word_min_length: int = FIRST_WORD_MIN_LENGTH
    ):
        self.threshold = threshold
        self.first_word_min_length = first_word_min_length

    def match_rule(self, skill: str, resume_lower: str) -> Optional[str]:
        """Return the name of the first rule that matches `skill`, or None."""
        if skill in resume_lower:
            return RULE_PHRASE

        words = skill.split()
        first_word = words[0]
        if len(first_word) >= self.first_word_min_length and first_word in resume_lower:
            return RULE_FIRST_WORD

        if len(words) > 1 and any(word in resume_lower for word in words):
            return RULE_ANY_WORD

        return None

    def analyze(
        self,
        job_skills: Union[str, Sequence[str], JobDescription],
        resume: str
    ) -> SkillAnalysis:
        """
        Score a resume against the job's skill list.

        Args:
            job_skills: Comma-joined skills, a list of skills, or a JobDescription
            resume: Resume text

        Returns:
            SkillAnalysis with every job skill classified as strength or weakness

        Raises:
            ConfigurationError: If the job defines no skills
        """
        if isinstance(job_skills, JobDescription):
            job_skills = job_skills.skills

        skills = parse_skills(job_skills)
        if not skills:
            logger.error("Job description has no skills defined")
            raise ConfigurationError("Job description has no skills defined")

        resume_lower = (resume or "").lower()
        logger.debug(f"Job skills: {skills}; resume length: {len(resume_lower)}")

        classified = {}
        for skill in skills:
            rule = self.match_rule(skill, resume_lower)
            if rule:
                classified[skill] = SkillStatus.STRENGTH
                logger.debug(f"Matched ({rule}): {skill}")
            else:
                classified[skill] = SkillStatus.WEAKNESS
                logger.debug(f"Not matched: {skill}")

        matched = sum(1 for status in classified.values() if status is SkillStatus.STRENGTH)
        total = len(skills)
        percent = round_half_up(100 * matched / total)

        logger.info(f"Skill match: {percent}% ({matched}/{total}), threshold {self.threshold}%")
        return SkillAnalysis(
            matched_count=matched,
            total_count=total,
            percent=percent,
            skills=classified,
        )

    def auto_proceeds(self, analysis: SkillAnalysis) -> bool:
        """True when the analysis clears the interview gate without confirmation."""
        return analysis.percent >= self.threshold

    def requires_confirmation(self, analysis: SkillAnalysis) -> bool:
        return not self.auto_proceeds(analysis)
