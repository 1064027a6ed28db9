"""
FastAPI application for the candidate screening engine.

Endpoints:
- POST /analyze - Match a resume against a job and open an interview session
- POST /interview/{session_id}/start - Generate questions and start the interview
- PUT /interview/{session_id}/answers/{index} - Save the answer to the current question
- POST /interview/{session_id}/next - Move to the next question
- POST /interview/{session_id}/finish - Score answers and compose the result
- POST /interview/{session_id}/submit - Submit the composite score
- GET /interview/{session_id} - Session status
- DELETE /interview/{session_id} - Discard a session
- GET /health - Health check
"""
from fastapi import Depends, FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from talentscreen.api import (
    AnalyzeRequest,
    AnalyzeResponse,
    AnswerCheckResponse,
    AssessmentResultResponse,
    HealthResponse,
    InterviewStatusResponse,
    NextQuestionResponse,
    ScreeningService,
    SessionNotFoundError,
    StartInterviewRequest,
    StartInterviewResponse,
    SubmitAnswerRequest,
    SubmitScoreResponse,
    get_service
)
from talentscreen.errors import (
    AssessmentError,
    ConfigurationError,
    EmptyResultError,
    EmptyResumeError,
    InvalidAnswerError,
    NoAnswersError,
    PersistenceError,
    SessionStateError
)
from talentscreen.utils.logger import setup_logger

logger = setup_logger("fastapi_app")

# Create FastAPI app
app = FastAPI(
    title="Candidate Screening API",
    description="Resume skill matching, automated interview questions and heuristic answer scoring",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, specify actual origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _http_error(e: Exception) -> HTTPException:
    """Map engine errors to HTTP errors with a user-visible message."""
    if isinstance(e, SessionNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Session not found: {e.args[0]}")
    if isinstance(e, (ConfigurationError, EmptyResultError, EmptyResumeError, NoAnswersError, InvalidAnswerError)):
        return HTTPException(status_code=422, detail=str(e))
    if isinstance(e, SessionStateError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    if isinstance(e, PersistenceError):
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"{e} The result is kept; please try saving again."
        )
    logger.error(f"Unexpected error: {e}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=f"Unexpected error: {str(e)}")


@app.get("/", tags=["General"])
async def root():
    """Root endpoint with API information."""
    return {
        "message": "Candidate Screening API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }


@app.get("/health", response_model=HealthResponse, tags=["General"])
async def health_check(service: ScreeningService = Depends(get_service)):
    """Health check endpoint."""
    return service.health()


@app.post("/analyze", response_model=AnalyzeResponse, tags=["Screening"])
def analyze_resume(request: AnalyzeRequest, service: ScreeningService = Depends(get_service)):
    """
    Match a resume against a job description.

    Opens an interview session. When `auto_proceed` is false the interview can
    still be started, but only with explicit confirmation.
    """
    try:
        logger.info(f"Analyze request: resume length={len(request.resume)}, job={request.job.title!r}")
        return service.analyze(request)
    except (AssessmentError, SessionNotFoundError) as e:
        raise _http_error(e)


@app.post("/interview/{session_id}/start", response_model=StartInterviewResponse, tags=["Interview"])
def start_interview(
    session_id: str,
    request: StartInterviewRequest = StartInterviewRequest(),
    service: ScreeningService = Depends(get_service)
):
    """Generate the interview questions and start at the first one."""
    try:
        return service.start_interview(session_id, confirmed=request.confirmed)
    except (AssessmentError, SessionNotFoundError) as e:
        raise _http_error(e)


@app.put("/interview/{session_id}/answers/{index}", response_model=AnswerCheckResponse, tags=["Interview"])
def submit_answer(
    session_id: str,
    index: int,
    request: SubmitAnswerRequest,
    service: ScreeningService = Depends(get_service)
):
    """Save (or overwrite) the answer to the current question; earlier answers are frozen."""
    try:
        return service.record_answer(session_id, index, request.answer)
    except (AssessmentError, SessionNotFoundError) as e:
        raise _http_error(e)


@app.post("/interview/{session_id}/next", response_model=NextQuestionResponse, tags=["Interview"])
def next_question(session_id: str, service: ScreeningService = Depends(get_service)):
    """Advance past the answered current question; after the last one the interview completes."""
    try:
        return service.next_question(session_id)
    except (AssessmentError, SessionNotFoundError) as e:
        raise _http_error(e)


@app.post("/interview/{session_id}/finish", response_model=AssessmentResultResponse, tags=["Interview"])
def finish_interview(session_id: str, service: ScreeningService = Depends(get_service)):
    """Score every answer and compose the final assessment; returns the stored result once completed."""
    try:
        return service.finish(session_id)
    except (AssessmentError, SessionNotFoundError) as e:
        raise _http_error(e)


@app.post("/interview/{session_id}/submit", response_model=SubmitScoreResponse, tags=["Interview"])
def submit_score(session_id: str, service: ScreeningService = Depends(get_service)):
    """Send the composite score to the persistence service. Safe to retry."""
    try:
        return service.submit(session_id)
    except (AssessmentError, SessionNotFoundError) as e:
        raise _http_error(e)


@app.get("/interview/{session_id}", response_model=InterviewStatusResponse, tags=["Interview"])
def interview_status(session_id: str, service: ScreeningService = Depends(get_service)):
    try:
        return service.status(session_id)
    except SessionNotFoundError as e:
        raise _http_error(e)


@app.delete("/interview/{session_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["Interview"])
def discard_interview(session_id: str, service: ScreeningService = Depends(get_service)):
    """Discard a session and everything it holds."""
    try:
        service.discard(session_id)
    except SessionNotFoundError as e:
        raise _http_error(e)


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
