"""
Interview Session Manager.

Manages interview sessions:
- Explicit per-candidate session state (questions, answers, current index,
  listening flag, latest result)
- Gating the interview on the resume skill match
- Collecting typed or transcribed answers
- Scoring and composing the final result
"""
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from ..errors import EmptyResumeError, InvalidAnswerError, SessionStateError
from ..matching.skill_matcher import SkillMatcher
from ..models import Answer, AssessmentResult, JobDescription, SkillAnalysis
from ..utils.config import MIN_ANSWER_CHARS, MIN_ANSWER_WORDS
from ..utils.logger import setup_logger
from ..utils.text_utils import word_count
from ..voice.synthesis import SilentSynthesizer, SpeechSynthesizer
from ..voice.transcript import TranscriptBuffer
from .answer_scorer import AnswerScorer
from .question_generator import QuestionGenerator, build_default_strategies
from .result_composer import ResultComposer

logger = setup_logger("session_manager")


class SessionStatus(str, Enum):
    CREATED = "created"
    ANALYZED = "analyzed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class AnswerCheck:
    """Outcome of recording an answer; brief answers are kept but flagged."""
    question_index: int
    word_count: int
    char_count: int
    too_brief: bool


def check_answer(text: str, question_index: int = 0) -> AnswerCheck:
    text = (text or "").strip()
    words = word_count(text)
    return AnswerCheck(
        question_index=question_index,
        word_count=words,
        char_count=len(text),
        too_brief=len(text) < MIN_ANSWER_CHARS or words < MIN_ANSWER_WORDS,
    )


class InterviewSession:
    """
    State of one candidate's screening session.

    Each candidate gets their own instance; nothing is shared between sessions.
    Speech output is cancelled on every state transition.
    """

    def __init__(
        self,
        job: JobDescription,
        resume: str,
        candidate_name: str = "",
        api_key: Optional[str] = None,
        matcher: Optional[SkillMatcher] = None,
        question_generator: Optional[QuestionGenerator] = None,
        scorer: Optional[AnswerScorer] = None,
        composer: Optional[ResultComposer] = None,
        synthesizer: Optional[SpeechSynthesizer] = None,
        session_id: Optional[str] = None
    ):
        self.session_id = session_id or str(uuid.uuid4())
        self.job = job
        self.resume = (resume or "").strip()
        self.candidate_name = (candidate_name or "").strip()
        self.api_key = api_key

        self.matcher = matcher or SkillMatcher()
        self.question_generator = question_generator or QuestionGenerator(
            strategies=build_default_strategies(api_key=api_key)
        )
        self.scorer = scorer or AnswerScorer()
        self.composer = composer or ResultComposer()
        self.synthesizer = synthesizer or SilentSynthesizer()
        self.transcript = TranscriptBuffer()

        self.status = SessionStatus.CREATED
        self.analysis: Optional[SkillAnalysis] = None
        self.questions: List[str] = []
        self.answers: List[Answer] = []
        self.current_index = 0
        self.listening = False
        self.result: Optional[AssessmentResult] = None
        self.created_at = datetime.now().isoformat()

    # ---- analysis -------------------------------------------------------

    def analyze(self) -> SkillAnalysis:
        """Run the resume skill match; raises ConfigurationError for jobs without skills."""
        if not self.resume:
            raise EmptyResumeError("Please paste your resume text")
        self.analysis = self.matcher.analyze(self.job, self.resume)
        self.status = SessionStatus.ANALYZED
        return self.analysis

    @property
    def auto_proceed(self) -> bool:
        return self.analysis is not None and self.matcher.auto_proceeds(self.analysis)

    # ---- interview flow -------------------------------------------------

    def start_interview(self, confirmed: bool = False) -> List[str]:
        """
        Generate questions and begin at the first one.

        Below the skill-match threshold the caller must pass confirmed=True.

        Raises:
            SessionStateError: If the interview already finished (call restart()
                first) or confirmation is required but missing
            EmptyResultError: If no questions could be generated
        """
        if self.status is SessionStatus.COMPLETED:
            raise SessionStateError("Interview already completed; restart the session to interview again")
        if self.analysis is None:
            self.analyze()
        if not self.auto_proceed and not confirmed:
            raise SessionStateError(
                f"Skill match {self.analysis.percent}% is below {self.matcher.threshold}%; "
                "confirmation required to start the interview"
            )

        self.synthesizer.cancel()
        questions = self.question_generator.generate_questions(self.job, self.resume)

        self.questions = list(questions)
        self.answers = [Answer(question_index=i) for i in range(len(self.questions))]
        self.current_index = 0
        self.result = None
        self.transcript.reset()
        self.status = SessionStatus.IN_PROGRESS

        logger.info(f"Session {self.session_id}: interview started with {len(self.questions)} questions")
        self.speak_question()
        return self.questions

    @property
    def current_question(self) -> Optional[str]:
        if self.status is not SessionStatus.IN_PROGRESS:
            return None
        return self.questions[self.current_index]

    @property
    def is_last_question(self) -> bool:
        return self.current_index == len(self.questions) - 1

    def _require_in_progress(self):
        if self.status is not SessionStatus.IN_PROGRESS:
            raise SessionStateError(f"Interview is not in progress (status: {self.status.value})")

    def record_answer(self, text: str, question_index: Optional[int] = None) -> AnswerCheck:
        """
        Store the answer to the current question, overwriting any previous text.

        Answers are frozen once the interview moves past them, and questions
        that have not been asked yet cannot be answered.

        Raises:
            InvalidAnswerError: For an empty answer or an index other than the current one
        """
        self._require_in_progress()
        index = self.current_index if question_index is None else question_index
        if index != self.current_index:
            raise InvalidAnswerError(
                f"Only the current question ({self.current_index}) can be answered, not {index}"
            )

        text = (text or "").strip()
        if not text:
            raise InvalidAnswerError("Please provide an answer before proceeding")

        self.answers[index].text = text
        self.transcript.reset(text)

        check = check_answer(text, index)
        if check.too_brief:
            logger.info(
                f"Session {self.session_id}: brief answer to question {index + 1} "
                f"({check.word_count} words, {check.char_count} chars)"
            )
        return check

    def next_question(self, text: Optional[str] = None) -> Optional[str]:
        """
        Advance past the current question, finishing after the last one.

        Returns:
            The next question, or None when the interview has finished
        """
        self._require_in_progress()
        if text is not None:
            self.record_answer(text)
        if not self.answers[self.current_index].text:
            raise InvalidAnswerError("Please provide an answer before proceeding")

        self.synthesizer.cancel()
        if self.is_last_question:
            self.finish()
            return None

        self.current_index += 1
        self.transcript.reset(self.answers[self.current_index].text)
        self.speak_question()
        return self.current_question

    def finish(self) -> AssessmentResult:
        """
        Score every answer and compose the final result.

        Raises:
            SessionStateError: If the interview is not running or a question is unanswered
        """
        self._require_in_progress()
        unanswered = [a.question_index + 1 for a in self.answers if not a.text]
        if unanswered:
            raise SessionStateError(f"Questions not answered: {unanswered}")

        self.synthesizer.cancel()
        self.stop_listening()

        texts = [a.text for a in self.answers]
        scores = self.scorer.score_answers(texts, self.analysis.strengths)
        self.result = self.composer.compose(
            self.analysis,
            self.questions,
            texts,
            scores,
            candidate_name=self.candidate_name
        )
        self.status = SessionStatus.COMPLETED
        logger.info(f"Completed interview session: {self.session_id}")
        return self.result

    def restart(self):
        """Clear the interview; the analysis is kept."""
        self.synthesizer.cancel()
        self.stop_listening()
        self.questions = []
        self.answers = []
        self.current_index = 0
        self.result = None
        self.transcript.reset()
        self.status = SessionStatus.ANALYZED if self.analysis else SessionStatus.CREATED

    # ---- voice ----------------------------------------------------------

    def speak_question(self):
        question = self.current_question
        if not question:
            return
        self.synthesizer.cancel()
        self.synthesizer.speak(question)

    def start_listening(self):
        self._require_in_progress()
        self.synthesizer.cancel()
        self.transcript.reset(self.answers[self.current_index].text)
        self.listening = True

    def stop_listening(self):
        self.listening = False

    def append_transcript(self, segment: str, is_final: bool = True) -> str:
        """
        Feed a transcript segment from the capture source into the current answer.

        Returns:
            The current answer text
        """
        self._require_in_progress()
        text = self.transcript.push(segment, is_final)
        self.answers[self.current_index].text = text
        return text

    @property
    def answered_count(self) -> int:
        return sum(1 for a in self.answers if a.text)


class InterviewSessionManager:
    """
    In-memory registry of interview sessions keyed by session id.

    Sessions are discarded when the candidate is done with them.
    """

    def __init__(self):
        self._sessions: Dict[str, InterviewSession] = {}
        self._lock = threading.Lock()
        logger.info("InterviewSessionManager initialized")

    def create_session(self, job: JobDescription, resume: str, candidate_name: str = "", **kwargs) -> InterviewSession:
        session = InterviewSession(job, resume, candidate_name=candidate_name, **kwargs)
        self.register(session)
        logger.info(f"Created interview session: {session.session_id} for candidate: {candidate_name or 'anonymous'}")
        return session

    def register(self, session: InterviewSession) -> InterviewSession:
        with self._lock:
            self._sessions[session.session_id] = session
        return session

    def get_session(self, session_id: str) -> Optional[InterviewSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def discard_session(self, session_id: str) -> bool:
        with self._lock:
            removed = self._sessions.pop(session_id, None)
        if removed is not None:
            removed.synthesizer.cancel()
            logger.info(f"Discarded interview session: {session_id}")
        return removed is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


# Singleton instance
_session_manager = None


def get_session_manager() -> InterviewSessionManager:
    """
    Get or create session manager instance (singleton).

    Returns:
        InterviewSessionManager instance
    """
    global _session_manager
    if _session_manager is None:
        _session_manager = InterviewSessionManager()
    return _session_manager
