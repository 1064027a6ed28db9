"""
FastAPI request and response models.
"""
from pydantic import BaseModel, Field
from typing import List, Optional, Union

from ..models import AnswerScore, AssessmentResult, SkillAnalysis


class JobRecord(BaseModel):
    """Job description as supplied by the job catalog."""
    title: str = Field(..., description="Job title")
    skills: Union[str, List[str]] = Field(..., description="Required skills, comma-joined or as a list")
    experience: str = Field("", description="Experience requirement")
    description: str = Field("", description="Free-text job description")


class AnalyzeRequest(BaseModel):
    """Request model for resume analysis."""
    candidate_name: str = Field("", description="Candidate name (defaults to a timestamped placeholder)")
    resume: str = Field(..., description="Resume text")
    job: JobRecord = Field(..., description="Job description to match against")
    api_key: Optional[str] = Field(None, description="Credential for the question generation service")

    class Config:
        json_schema_extra = {
            "example": {
                "candidate_name": "Jane Doe",
                "resume": "Backend developer with 5 years of Python and SQL experience.",
                "job": {
                    "title": "Backend Engineer",
                    "skills": "Python, SQL, Docker",
                    "experience": "3+ years",
                    "description": "Build and operate our data APIs."
                }
            }
        }


class SkillAnalysisResponse(BaseModel):
    """Skill matching analysis."""
    matched_count: int = Field(..., description="Number of job skills found in the resume")
    total_count: int = Field(..., description="Number of job skills")
    percent: int = Field(..., ge=0, le=100, description="Percentage of job skills matched")
    strengths: List[str] = Field(..., description="Job skills found in the resume")
    weaknesses: List[str] = Field(..., description="Job skills missing from the resume")

    @classmethod
    def from_analysis(cls, analysis: SkillAnalysis) -> "SkillAnalysisResponse":
        return cls(**analysis.to_dict())


class AnalyzeResponse(BaseModel):
    """Response model for resume analysis."""
    session_id: str = Field(..., description="Interview session ID")
    analysis: SkillAnalysisResponse = Field(..., description="Skill match result")
    auto_proceed: bool = Field(..., description="Whether the interview can start without confirmation")
    threshold: int = Field(..., description="Skill match threshold in percent")
    message: str = Field(..., description="Status message")


class StartInterviewRequest(BaseModel):
    """Request model for starting an interview."""
    confirmed: bool = Field(False, description="Start even though the skill match is below threshold")


class StartInterviewResponse(BaseModel):
    session_id: str = Field(..., description="Interview session ID")
    questions: List[str] = Field(..., description="Interview questions in order")
    current_question_index: int = Field(..., description="Index of the question being asked")
    message: str = Field(..., description="Status message")


class SubmitAnswerRequest(BaseModel):
    """Request model for submitting an answer."""
    answer: str = Field(..., description="Candidate's answer")

    class Config:
        json_schema_extra = {
            "example": {
                "answer": "I built a Python service with SQL storage that handled 2000 users."
            }
        }


class AnswerCheckResponse(BaseModel):
    question_index: int = Field(..., description="Question index")
    word_count: int = Field(..., description="Words in the answer")
    char_count: int = Field(..., description="Characters in the answer")
    too_brief: bool = Field(..., description="Whether the answer is shorter than recommended")
    message: str = Field(..., description="Status message")


class NextQuestionResponse(BaseModel):
    """Response model for advancing past the current question."""
    session_id: str = Field(..., description="Interview session ID")
    current_question_index: Optional[int] = Field(None, description="Index of the question now being asked")
    current_question: Optional[str] = Field(None, description="Question now being asked")
    completed: bool = Field(..., description="Whether the interview finished on this call")
    message: str = Field(..., description="Status message")


class AnswerScoreResponse(BaseModel):
    question_index: int = Field(..., description="Question index")
    score: int = Field(..., ge=0, le=100, description="Answer quality (0-100)")
    word_count: int = Field(..., description="Words in the answer")
    detail: int = Field(..., description="Detail sub-score (0-30)")
    relevance: int = Field(..., description="Relevance sub-score (0-35)")
    specificity: int = Field(..., description="Specificity sub-score (0-35)")
    skills_matched: List[str] = Field(..., description="Strength skills mentioned in the answer")
    feedback: List[str] = Field(..., description="Feedback tags, one per sub-score")

    @classmethod
    def from_score(cls, score: AnswerScore) -> "AnswerScoreResponse":
        return cls(
            question_index=score.question_index,
            score=score.score,
            word_count=score.word_count,
            detail=score.detail,
            relevance=score.relevance,
            specificity=score.specificity,
            skills_matched=list(score.skills_matched),
            feedback=list(score.feedback)
        )


class AssessmentResultResponse(BaseModel):
    """Response model for a completed assessment."""
    id: str = Field(..., description="Result ID")
    candidate_name: str = Field(..., description="Candidate name")
    resume_match_percent: int = Field(..., ge=0, le=100, description="Resume skill match")
    answer_quality_percent: int = Field(..., ge=0, le=100, description="Average answer quality")
    composite_score: int = Field(..., ge=0, le=100, description="60/40 blend of resume match and answer quality")
    strengths: List[str] = Field(..., description="Strengths after redemption")
    weaknesses: List[str] = Field(..., description="Areas to improve")
    answers: List[str] = Field(..., description="Answers in question order")
    answer_scores: List[AnswerScoreResponse] = Field(..., description="Per-answer scores")
    questions: List[str] = Field(..., description="Questions asked")
    timestamp: str = Field(..., description="Completion time (ISO 8601)")
    status: str = Field(..., description="Selected or Rejected")

    @classmethod
    def from_result(cls, result: AssessmentResult) -> "AssessmentResultResponse":
        return cls(
            id=result.id,
            candidate_name=result.candidate_name,
            resume_match_percent=result.resume_match_percent,
            answer_quality_percent=result.answer_quality_percent,
            composite_score=result.composite_score,
            strengths=list(result.strengths),
            weaknesses=list(result.weaknesses),
            answers=list(result.answers),
            answer_scores=[AnswerScoreResponse.from_score(s) for s in result.answer_scores],
            questions=list(result.questions),
            timestamp=result.timestamp,
            status=result.status.value
        )


class InterviewStatusResponse(BaseModel):
    """Response model for interview status."""
    session_id: str = Field(..., description="Session ID")
    status: str = Field(..., description="Session status: created, analyzed, in_progress, completed")
    candidate_name: str = Field(..., description="Candidate name")
    total_questions: int = Field(..., description="Total questions")
    answered_questions: int = Field(..., description="Number of answered questions")
    current_question_index: Optional[int] = Field(None, description="Current question index (if in progress)")
    current_question: Optional[str] = Field(None, description="Current question (if in progress)")
    composite_score: Optional[int] = Field(None, description="Composite score (if completed)")


class SubmitScoreResponse(BaseModel):
    score: int = Field(..., description="Submitted composite score")
    message: str = Field(..., description="Status message")


class HealthResponse(BaseModel):
    """Response model for health check."""
    status: str = Field(..., description="Service status")
    active_sessions: int = Field(..., description="Sessions currently held in memory")
    llm_configured: bool = Field(..., description="Whether the Groq question strategy is enabled")
