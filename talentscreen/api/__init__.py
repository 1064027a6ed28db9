"""
FastAPI API modules.
"""
from .models import (
    JobRecord,
    AnalyzeRequest,
    AnalyzeResponse,
    SkillAnalysisResponse,
    StartInterviewRequest,
    StartInterviewResponse,
    SubmitAnswerRequest,
    AnswerCheckResponse,
    AnswerScoreResponse,
    AssessmentResultResponse,
    InterviewStatusResponse,
    NextQuestionResponse,
    SubmitScoreResponse,
    HealthResponse
)
from .service import ScreeningService, SessionNotFoundError, get_service

__all__ = [
    'JobRecord',
    'AnalyzeRequest',
    'AnalyzeResponse',
    'SkillAnalysisResponse',
    'StartInterviewRequest',
    'StartInterviewResponse',
    'SubmitAnswerRequest',
    'AnswerCheckResponse',
    'AnswerScoreResponse',
    'AssessmentResultResponse',
    'InterviewStatusResponse',
    'NextQuestionResponse',
    'SubmitScoreResponse',
    'HealthResponse',
    'ScreeningService',
    'SessionNotFoundError',
    'get_service'
]
