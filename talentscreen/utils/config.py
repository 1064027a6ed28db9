"""
Configuration settings for the candidate screening engine.

Every value can be overridden through an environment variable of the same name.
"""
import os
from pathlib import Path

# Base paths
BASE_DIR = Path(__file__).parent.parent.parent
REPORTS_DIR = Path(os.environ.get("REPORTS_DIR", BASE_DIR / "assessment_reports"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FILE = os.environ.get("LOG_FILE")  # stdout only when unset

# Skill matching
SKILL_MATCH_THRESHOLD = int(os.environ.get("SKILL_MATCH_THRESHOLD", 70))  # auto-proceed when percent >= this
FIRST_WORD_MIN_LENGTH = int(os.environ.get("FIRST_WORD_MIN_LENGTH", 3))

# Composite scoring
RESUME_WEIGHT = float(os.environ.get("RESUME_WEIGHT", 0.6))
ANSWER_WEIGHT = float(os.environ.get("ANSWER_WEIGHT", 0.4))
SELECTION_THRESHOLD = int(os.environ.get("SELECTION_THRESHOLD", 70))  # selected when composite > this

# Interview settings
QUESTION_COUNT = int(os.environ.get("QUESTION_COUNT", 5))
RESUME_FOLLOWUP_SEGMENTS = int(os.environ.get("RESUME_FOLLOWUP_SEGMENTS", 3))
MIN_ANSWER_CHARS = int(os.environ.get("MIN_ANSWER_CHARS", 20))
MIN_ANSWER_WORDS = int(os.environ.get("MIN_ANSWER_WORDS", 5))

# Remote question generation service
QUESTION_SERVICE_URL = os.environ.get(
    "QUESTION_SERVICE_URL", "https://api.mock-openai.local/generate-questions"
)
QUESTION_SERVICE_TIMEOUT = float(os.environ.get("QUESTION_SERVICE_TIMEOUT", 10))
QUESTION_SERVICE_API_KEY = os.environ.get("QUESTION_SERVICE_API_KEY")

# Score submission (external persistence collaborator)
SCORE_SERVICE_URL = os.environ.get("SCORE_SERVICE_URL", "http://localhost:8080/save-score")
SCORE_SERVICE_TIMEOUT = float(os.environ.get("SCORE_SERVICE_TIMEOUT", 10))

# Optional LLM question strategy; disabled when no key is set
GROQ_API_KEY = os.environ.get("GROQ_API_KEY")
GROQ_MODEL_NAME = os.environ.get("GROQ_MODEL_NAME", "meta-llama/llama-4-scout-17b-16e-instruct")
GROQ_TEMPERATURE = float(os.environ.get("GROQ_TEMPERATURE", 0.7))
GROQ_MAX_TOKENS = int(os.environ.get("GROQ_MAX_TOKENS", 1024))
