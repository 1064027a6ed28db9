"""
Text-to-speech output for interview questions.

The engine only needs two primitives from a speech backend: speak a string,
and cancel whatever is currently being spoken. Sessions cancel on every
interview state transition.
"""
from ..utils.logger import setup_logger

logger = setup_logger("synthesis")


class SpeechSynthesizer:
    """Interface for a speech backend."""

    def speak(self, text: str):
        raise NotImplementedError

    def cancel(self):
        raise NotImplementedError


class SilentSynthesizer(SpeechSynthesizer):
    """Used when no speech backend is attached; questions are shown as text only."""

    def __init__(self):
        self.last_spoken = None

    def speak(self, text: str):
        self.last_spoken = text
        logger.debug(f"Speech disabled, not speaking: {text!r}")

    def cancel(self):
        self.last_spoken = None
