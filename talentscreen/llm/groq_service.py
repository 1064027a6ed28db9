"""
Groq-hosted chat model for drafting interview questions.

Optional: the question generator only adds the LLM strategy when a Groq key
is configured, so nothing here runs for a plain local setup.
"""
import os
from typing import Optional

from langchain_classic.chains import LLMChain
from langchain_core.prompts import PromptTemplate
from langchain_groq import ChatGroq

from ..errors import ConfigurationError
from ..utils.config import (
    GROQ_API_KEY,
    GROQ_MAX_TOKENS,
    GROQ_MODEL_NAME,
    GROQ_TEMPERATURE,
    QUESTION_SERVICE_TIMEOUT
)
from ..utils.logger import setup_logger

logger = setup_logger("groq_service")

QUESTION_TEMPLATE = (
    "You are an expert interviewer preparing a screening interview.\n\n"
    "{prompt}\n\n"
    "Respond with the JSON array only, no commentary."
)


def _groq_key() -> Optional[str]:
    return os.environ.get("GROQ_API_KEY", GROQ_API_KEY)


def groq_configured() -> bool:
    return bool(_groq_key())


def initialize_llm(api_key: Optional[str] = None, model_name: Optional[str] = None) -> ChatGroq:
    """
    Create the chat model used by the LLM question strategy.

    Temperature and token limit come from config. Each call is bounded by
    QUESTION_SERVICE_TIMEOUT and never retried; a failure falls through to
    the next question strategy.

    Raises:
        ConfigurationError: If no Groq key is available
    """
    api_key = api_key or _groq_key()
    if not api_key:
        raise ConfigurationError("GROQ_API_KEY is not set; the LLM question strategy is unavailable")

    model_name = model_name or GROQ_MODEL_NAME
    logger.info(f"Using Groq model {model_name} for question drafting")
    return ChatGroq(
        groq_api_key=api_key,
        model_name=model_name,
        temperature=GROQ_TEMPERATURE,
        max_tokens=GROQ_MAX_TOKENS,
        timeout=QUESTION_SERVICE_TIMEOUT,
        max_retries=0
    )


def create_question_chain(llm) -> LLMChain:
    """
    Wrap a LangChain language model in a question drafting chain.

    The chain takes a single "prompt" input (built by the question generator)
    and returns the raw model text under "questions".
    """
    prompt = PromptTemplate(input_variables=["prompt"], template=QUESTION_TEMPLATE)
    return LLMChain(llm=llm, prompt=prompt, output_key="questions")
