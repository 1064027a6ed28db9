"""
Domain records for the assessment engine.
"""
from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple, Union

from .utils.text_utils import split_skills


class SkillStatus(str, Enum):
    """Classification of a single job skill for one candidate."""
    UNKNOWN = "unknown"
    WEAKNESS = "weakness"
    STRENGTH = "strength"


class AssessmentStatus(str, Enum):
    SELECTED = "Selected"
    REJECTED = "Rejected"


@dataclass(frozen=True)
class JobDescription:
    """Job record supplied by the external job catalog."""
    title: str
    skills: Tuple[str, ...]
    experience: str = ""
    description: str = ""

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "JobDescription":
        """
        Build a job description from a catalog record.

        `skills` may be a comma-joined string or a list of strings.
        """
        raw_skills: Union[str, Iterable[str]] = record.get("skills") or ""
        if isinstance(raw_skills, str):
            skills = split_skills(raw_skills)
        else:
            skills = [s.strip() for s in raw_skills if s and s.strip()]
        return cls(
            title=(record.get("title") or "").strip(),
            skills=tuple(skills),
            experience=record.get("experience") or "",
            description=record.get("description") or "",
        )

    @property
    def skills_text(self) -> str:
        return ", ".join(self.skills)


@dataclass(frozen=True)
class SkillAnalysis:
    """
    Resume-vs-job skill overlap.

    `skills` maps every lower-cased job skill to its classification, in job order,
    so a skill can never be both a strength and a weakness.
    """
    matched_count: int
    total_count: int
    percent: int
    skills: Dict[str, SkillStatus] = field(default_factory=dict)

    @property
    def strengths(self) -> List[str]:
        return [s for s, status in self.skills.items() if status is SkillStatus.STRENGTH]

    @property
    def weaknesses(self) -> List[str]:
        return [s for s, status in self.skills.items() if status is SkillStatus.WEAKNESS]

    def promote(self, redeemed: Iterable[str]) -> "SkillAnalysis":
        """Return a copy with the given weaknesses reclassified as strengths."""
        redeemed = set(redeemed)
        skills = {
            skill: SkillStatus.STRENGTH if skill in redeemed and status is SkillStatus.WEAKNESS else status
            for skill, status in self.skills.items()
        }
        return replace(self, skills=skills)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matched_count": self.matched_count,
            "total_count": self.total_count,
            "percent": self.percent,
            "strengths": self.strengths,
            "weaknesses": self.weaknesses,
        }


@dataclass
class Answer:
    """A respondent's answer; overwritten until the interview moves past it."""
    question_index: int
    text: str = ""


@dataclass(frozen=True)
class AnswerScore:
    question_index: int
    score: int
    word_count: int
    detail: int
    relevance: int
    specificity: int
    skills_matched: Tuple[str, ...] = ()
    feedback: Tuple[str, ...] = ()


@dataclass(frozen=True)
class AssessmentResult:
    """Terminal record of one candidate session."""
    id: str
    candidate_name: str
    resume_match_percent: int
    answer_quality_percent: int
    composite_score: int
    strengths: Tuple[str, ...]
    weaknesses: Tuple[str, ...]
    answers: Tuple[str, ...]
    answer_scores: Tuple[AnswerScore, ...]
    questions: Tuple[str, ...]
    timestamp: str
    status: AssessmentStatus

    @property
    def selected(self) -> bool:
        return self.status is AssessmentStatus.SELECTED

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data
