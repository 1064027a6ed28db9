"""
Text processing helpers shared by the matcher, the generator and the scorer.
"""
import re
from typing import List

_SEGMENT_SPLIT = re.compile(r'[.\n]+')


def word_count(text: str) -> int:
    """Count whitespace-separated words."""
    if not text:
        return 0
    return len(text.split())


def split_skills(raw: str) -> List[str]:
    """
    Split a comma-joined skill string into trimmed entries.

    Empty entries are dropped; case is preserved.
    """
    if not raw:
        return []
    return [s.strip() for s in raw.split(',') if s.strip()]


def split_segments(text: str) -> List[str]:
    """
    Split text into sentence-like segments on periods and newlines.

    Args:
        text: Free text (typically a resume)

    Returns:
        Non-empty, trimmed segments in their original order
    """
    if not text:
        return []
    return [s.strip() for s in _SEGMENT_SPLIT.split(text) if s.strip()]


def prepare_resume_text(text: str, head_chars: int = 6000, tail_chars: int = 3000) -> str:
    """
    Prepare resume text for an LLM prompt by keeping head and tail.

    Args:
        text: Full resume text
        head_chars: Number of characters to keep from start
        tail_chars: Number of characters to keep from end

    Returns:
        Prepared resume text
    """
    if not text:
        return ""

    text = re.sub(r'\s+', ' ', text).strip()
    if len(text) <= head_chars + tail_chars:
        return text
    return text[:head_chars] + "\n...\n" + text[-tail_chars:]
