"""
LLM service modules for Groq Cloud integration.
"""
from .groq_service import initialize_llm, create_question_chain, groq_configured

__all__ = ['initialize_llm', 'create_question_chain', 'groq_configured']
