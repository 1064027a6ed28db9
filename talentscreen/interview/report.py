"""
Rendering and local snapshots of assessment results.
"""
import json
import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from ..models import AssessmentResult
from ..utils.config import REPORTS_DIR
from ..utils.logger import setup_logger

logger = setup_logger("assessment_report")


def _join(items, empty: str = "—") -> str:
    return ", ".join(items) or empty


def render_answer_breakdown(result: AssessmentResult) -> List[str]:
    lines = []
    for i, score in enumerate(result.answer_scores):
        line = f"Q{i + 1}: {score.score}% Quality | {' | '.join(score.feedback)} | {score.word_count} words"
        if score.skills_matched:
            line += f" | Skills: {', '.join(score.skills_matched)}"
        lines.append(line)
    return lines


def render_summary(result: AssessmentResult) -> str:
    """Human-readable summary of a completed assessment."""
    lines = [
        f"Candidate: {result.candidate_name}",
        f"Resume Match: {result.resume_match_percent}%",
        f"Answer Quality: {result.answer_quality_percent}%",
        f"Overall Match: {result.composite_score}%",
        f"Status: {result.status.value}",
        f"Strengths: {_join(result.strengths)}",
        f"Areas to Improve: {_join(result.weaknesses)}",
        "Answer Quality Breakdown:",
    ]
    lines.extend("  " + line for line in render_answer_breakdown(result))
    return "\n".join(lines)


def save_report(result: AssessmentResult, directory: Optional[Path] = None, filename: Optional[str] = None) -> Path:
    """
    Write a JSON snapshot of the result so the score survives a failed submission.

    Returns:
        Path of the written file
    """
    directory = Path(directory or REPORTS_DIR)
    directory.mkdir(parents=True, exist_ok=True)

    if filename is None:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        candidate = re.sub(r'[^A-Za-z0-9_-]+', '_', result.candidate_name).strip('_') or "candidate"
        filename = f"assessment_{candidate}_{timestamp}.json"

    filepath = directory / filename
    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)

    logger.info(f"Assessment report saved to: {filepath}")
    return filepath


def load_report(filepath: Path) -> dict:
    """Read a saved snapshot back as a plain dictionary."""
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)
