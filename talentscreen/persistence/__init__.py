"""
Hand-off of final scores to the external persistence service.
"""
from .score_submitter import ScoreSubmitter

__all__ = ['ScoreSubmitter']
