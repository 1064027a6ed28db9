"""
Screening interview engine.

This module provides:
- Question generation (remote service, optional LLM, local templates)
- Heuristic answer scoring
- Result composition and weakness redemption
- Interview session management
"""

from .question_generator import (
    QuestionGenerator,
    QuestionStrategy,
    RemoteQuestionStrategy,
    LLMQuestionStrategy,
    LocalQuestionStrategy,
    build_default_strategies
)
from .answer_scorer import AnswerScorer
from .result_composer import ResultComposer, redeem_weaknesses
from .session_manager import InterviewSession, InterviewSessionManager, SessionStatus, get_session_manager
from .report import render_summary, save_report, load_report

__all__ = [
    'QuestionGenerator',
    'QuestionStrategy',
    'RemoteQuestionStrategy',
    'LLMQuestionStrategy',
    'LocalQuestionStrategy',
    'build_default_strategies',
    'AnswerScorer',
    'ResultComposer',
    'redeem_weaknesses',
    'InterviewSession',
    'InterviewSessionManager',
    'SessionStatus',
    'get_session_manager',
    'render_summary',
    'save_report',
    'load_report'
]
