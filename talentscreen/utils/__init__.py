"""
Shared helpers: configuration, logging, text processing and rounding.
"""
from .logger import setup_logger
from .numbers import clamp, round_half_up
from .text_utils import prepare_resume_text, split_segments, split_skills, word_count

__all__ = [
    'setup_logger',
    'clamp',
    'round_half_up',
    'prepare_resume_text',
    'split_segments',
    'split_skills',
    'word_count'
]
