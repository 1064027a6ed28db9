"""
Service layer connecting the HTTP API to interview sessions.
"""
from typing import Optional

from ..errors import SessionStateError
from ..interview.session_manager import (
    InterviewSession,
    InterviewSessionManager,
    SessionStatus,
    get_session_manager
)
from ..llm.groq_service import groq_configured
from ..models import JobDescription
from ..persistence.score_submitter import ScoreSubmitter
from ..utils.logger import setup_logger
from .models import (
    AnalyzeRequest,
    AnalyzeResponse,
    AnswerCheckResponse,
    AssessmentResultResponse,
    HealthResponse,
    InterviewStatusResponse,
    NextQuestionResponse,
    SkillAnalysisResponse,
    StartInterviewResponse,
    SubmitScoreResponse
)

logger = setup_logger("api_service")


class SessionNotFoundError(KeyError):
    """No session is registered under the given id."""


class ScreeningService:
    """
    Service class that owns the session registry and the score submitter.
    """

    def __init__(
        self,
        session_manager: Optional[InterviewSessionManager] = None,
        submitter: Optional[ScoreSubmitter] = None,
        session_factory=None
    ):
        self.sessions = session_manager if session_manager is not None else get_session_manager()
        self.submitter = submitter if submitter is not None else ScoreSubmitter()
        # callable(job, resume, candidate_name, api_key) -> InterviewSession
        self.session_factory = session_factory

    def health(self) -> HealthResponse:
        return HealthResponse(
            status="healthy",
            active_sessions=len(self.sessions),
            llm_configured=groq_configured()
        )

    def _get(self, session_id: str) -> InterviewSession:
        session = self.sessions.get_session(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def analyze(self, request: AnalyzeRequest) -> AnalyzeResponse:
        job = JobDescription.from_record(request.job.model_dump())
        if self.session_factory is not None:
            session = self.session_factory(job, request.resume, request.candidate_name, request.api_key)
            self.sessions.register(session)
        else:
            session = self.sessions.create_session(
                job, request.resume, candidate_name=request.candidate_name, api_key=request.api_key
            )

        try:
            analysis = session.analyze()
        except Exception:
            self.sessions.discard_session(session.session_id)
            raise

        threshold = session.matcher.threshold
        if session.auto_proceed:
            message = f"Profile matched: {analysis.percent}% match. Interview can start."
        else:
            message = (
                f"Profile not matching enough for this role (match {analysis.percent}%, "
                f"need {threshold}%). Confirm to start the interview anyway."
            )

        return AnalyzeResponse(
            session_id=session.session_id,
            analysis=SkillAnalysisResponse.from_analysis(analysis),
            auto_proceed=session.auto_proceed,
            threshold=threshold,
            message=message
        )

    def start_interview(self, session_id: str, confirmed: bool = False) -> StartInterviewResponse:
        session = self._get(session_id)
        questions = session.start_interview(confirmed=confirmed)
        return StartInterviewResponse(
            session_id=session_id,
            questions=questions,
            current_question_index=session.current_index,
            message=f"Starting interview: {len(questions)} questions."
        )

    def record_answer(self, session_id: str, index: int, answer: str) -> AnswerCheckResponse:
        session = self._get(session_id)
        check = session.record_answer(answer, question_index=index)
        if check.too_brief:
            message = (
                f"Your answer seems too brief ({check.word_count} words, {check.char_count} chars). "
                "Please provide a more detailed response."
            )
        else:
            message = "Answer saved."
        return AnswerCheckResponse(
            question_index=check.question_index,
            word_count=check.word_count,
            char_count=check.char_count,
            too_brief=check.too_brief,
            message=message
        )

    def next_question(self, session_id: str) -> NextQuestionResponse:
        session = self._get(session_id)
        question = session.next_question()
        if question is None:
            return NextQuestionResponse(
                session_id=session_id,
                completed=True,
                message="Interview complete. Fetch the result from /finish."
            )
        return NextQuestionResponse(
            session_id=session_id,
            current_question_index=session.current_index,
            current_question=question,
            completed=False,
            message=f"Question {session.current_index + 1} of {len(session.questions)}."
        )

    def finish(self, session_id: str) -> AssessmentResultResponse:
        session = self._get(session_id)
        if session.status is SessionStatus.COMPLETED:
            return AssessmentResultResponse.from_result(session.result)
        result = session.finish()
        return AssessmentResultResponse.from_result(result)

    def submit(self, session_id: str) -> SubmitScoreResponse:
        session = self._get(session_id)
        if session.result is None:
            raise SessionStateError("No result to save")
        self.submitter.submit(session.result)
        return SubmitScoreResponse(
            score=session.result.composite_score,
            message="Interview result saved to database."
        )

    def status(self, session_id: str) -> InterviewStatusResponse:
        session = self._get(session_id)
        in_progress = session.status is SessionStatus.IN_PROGRESS
        return InterviewStatusResponse(
            session_id=session.session_id,
            status=session.status.value,
            candidate_name=session.candidate_name,
            total_questions=len(session.questions),
            answered_questions=session.answered_count,
            current_question_index=session.current_index if in_progress else None,
            current_question=session.current_question,
            composite_score=session.result.composite_score if session.result else None
        )

    def discard(self, session_id: str) -> None:
        if not self.sessions.discard_session(session_id):
            raise SessionNotFoundError(session_id)


# Global service instance
_service_instance: Optional[ScreeningService] = None


def get_service() -> ScreeningService:
    """Get or create the global service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = ScreeningService()
    return _service_instance
