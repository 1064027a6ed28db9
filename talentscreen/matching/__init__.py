"""
Lexical skill matching between resumes and job descriptions.
"""
from .skill_matcher import SkillMatcher, parse_skills

__all__ = ['SkillMatcher', 'parse_skills']
