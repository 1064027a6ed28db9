"""
Voice adapters for the interview session.

Includes:
- TranscriptBuffer: collects pushed speech-to-text segments into an answer
- SpeechSynthesizer: speak/cancel interface for reading questions aloud
"""

from .transcript import TranscriptBuffer
from .synthesis import SpeechSynthesizer, SilentSynthesizer

__all__ = [
    'TranscriptBuffer',
    'SpeechSynthesizer',
    'SilentSynthesizer'
]
