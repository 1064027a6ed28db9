"""
Speech-to-text input for interview answers.

Speech capture happens outside the engine; the capture source pushes
transcript segments here as they become available. Final segments are
appended to the answer, interim segments are only kept for display.
"""
from typing import Optional

from ..utils.logger import setup_logger

logger = setup_logger("transcript")


class TranscriptBuffer:
    """Accumulates finalized transcript segments into one answer text."""

    def __init__(self, text: str = ""):
        self.text = (text or "").strip()
        self.interim = ""

    def push(self, segment: Optional[str], is_final: bool) -> str:
        """
        Accept a transcript segment from the capture source.

        Args:
            segment: Transcribed text
            is_final: Whether the capture source finalized this segment

        Returns:
            The accumulated answer text
        """
        segment = (segment or "").strip()
        if not is_final:
            self.interim = segment
            return self.text

        self.interim = ""
        if segment:
            self.text = f"{self.text} {segment}" if self.text else segment
            logger.debug(f"Captured: {segment!r}")
        return self.text

    def reset(self, text: str = ""):
        self.text = (text or "").strip()
        self.interim = ""
