import logging
from typing import Annotated

from fastapi import Depends, Request

from resume_builder.app.core.cache import ResumeCountCache
from resume_builder.app.core.config import Settings, get_settings
from resume_builder.app.llm.models import LLMConfig

log = logging.getLogger(__name__)


def get_llm_config(settings: Annotated[Settings, Depends(get_settings)]) -> LLMConfig:
    """
    Dependency to build the LLM client configuration from settings.

    Args:
        settings (Settings): The application settings.

    Returns:
        LLMConfig: Endpoint, API key and model name for the generative-AI endpoint.
            `api_key` is None when no key is configured.

    """
    return LLMConfig(
        llm_endpoint=settings.llm_endpoint,
        api_key=settings.llm_api_key,
        llm_model_name=settings.llm_model_name,
    )


def get_resume_count_cache(request: Request) -> ResumeCountCache:
    """Dependency returning the application's resume count cache from `app.state`."""
    return request.app.state.resume_count_cache
