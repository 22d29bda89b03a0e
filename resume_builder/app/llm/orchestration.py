import logging

from langchain_core.output_parsers import StrOutputParser
from langchain_openai import ChatOpenAI
from openai import APIError

from resume_builder.app.core.config import DEFAULT_LLM_MODEL
from resume_builder.app.llm.fallbacks import get_generic_resume, get_sample_resume
from resume_builder.app.llm.models import (
    ExtractedExperience,
    FallbackReason,
    GenerationResult,
    Language,
    LLMConfig,
)
from resume_builder.app.llm.parsing import extract_json_array, normalize_resume_response
from resume_builder.app.llm.prompts import (
    build_experience_extraction_prompt,
    build_resume_prompt,
)
from resume_builder.app.llm.safety import should_block

log = logging.getLogger(__name__)


def _initialize_llm_client(llm_config: LLMConfig) -> ChatOpenAI:
    """Initializes the chat client for the configured generative-AI endpoint.

    Args:
        llm_config (LLMConfig): Endpoint, API key and model name.

    Returns:
        ChatOpenAI: A client for the OpenAI-compatible endpoint.

    Notes:
        1. Fall back to the default model when no model name is configured.
        2. Point the client at `llm_endpoint` when one is configured.
        3. Disable client retries; a failed call is terminal and answered with fallback content.

    """
    llm_params = {
        "model": llm_config.llm_model_name or DEFAULT_LLM_MODEL,
        "temperature": 0.7,
        "max_retries": 0,
    }
    if llm_config.llm_endpoint:
        llm_params["openai_api_base"] = llm_config.llm_endpoint
    if llm_config.api_key:
        llm_params["api_key"] = llm_config.api_key

    return ChatOpenAI(**llm_params)


async def invoke_llm(prompt: str, llm_config: LLMConfig) -> str | None:
    """Send a single prompt to the generative-AI endpoint.

    Args:
        prompt (str): The complete prompt text.
        llm_config (LLMConfig): Endpoint, API key and model name.

    Returns:
        str | None: The model's text output, or None when the call cannot be made
            or fails. None means "fallback needed", never a hard error.

    Notes:
        1. A missing API key is treated like a network failure, and no call is attempted.
        2. Any `openai.APIError` (connection failure, timeout, non-2xx status) is logged and mapped to None.
        3. So is a 2xx answer the client cannot read, such as an error body or a
           missing `choices` list, which LangChain raises as ValueError, KeyError or TypeError.

    Network access:
        - This function makes one request to the configured LLM endpoint.

    """
    if not llm_config.api_key:
        _msg = "LLM API key is not configured; skipping the model call"
        log.warning(_msg)
        return None

    llm = _initialize_llm_client(llm_config)
    chain = llm | StrOutputParser()
    try:
        return await chain.ainvoke(prompt)
    except (APIError, ValueError, KeyError, TypeError) as e:
        _msg = f"LLM request failed: {e!s}"
        log.exception(_msg)
        return None


async def generate_resume(
    experience: str,
    lang: Language,
    llm_config: LLMConfig,
) -> GenerationResult:
    """Generate a structured resume from a free-text description.

    Args:
        experience (str): The validated, trimmed description.
        lang (Language): Output language.
        llm_config (LLMConfig): Endpoint, API key and model name.

    Returns:
        GenerationResult: The model's resume, or fallback content.

    Notes:
        1. Suspicious input never reaches the model and yields the generic resume.
        2. Build the prompt and call the model once.
        3. A missing key or a failed call yields the sample resume.
        4. Otherwise normalize the model output.

    Network access:
        - One request to the LLM endpoint unless the input is blocked or no key is set.

    """
    _msg = "generate_resume starting"
    log.debug(_msg)

    if should_block(experience):
        _msg = "Input flagged as suspicious; returning the generic resume"
        log.info(_msg)
        return GenerationResult(
            resume=get_generic_resume(lang),
            fallback=True,
            reason=FallbackReason.SUSPICIOUS_INPUT,
        )

    raw = await invoke_llm(build_resume_prompt(experience, lang), llm_config)
    if raw is None:
        return GenerationResult(
            resume=get_sample_resume(lang),
            fallback=True,
            reason=FallbackReason.PROVIDER_UNAVAILABLE,
        )

    result = normalize_resume_response(raw, lang)

    _msg = f"generate_resume returning (fallback={result.fallback})"
    log.debug(_msg)
    return result


async def extract_experiences(text: str, llm_config: LLMConfig) -> list[ExtractedExperience]:
    """Extract work experience entries from free text.

    Args:
        text (str): Free text describing the user's work history.
        llm_config (LLMConfig): Endpoint, API key and model name.

    Returns:
        list[ExtractedExperience]: The entries found. Empty when the input is
            suspicious, the model is unavailable, or its output is unusable.

    Notes:
        1. Suspicious input is not sent to the model.
        2. Request a JSON array with the narrower extraction prompt.
        3. Keep only object entries; missing or empty fields become None.

    Network access:
        - One request to the LLM endpoint unless the input is blocked or no key is set.

    """
    if should_block(text):
        _msg = "Extraction input flagged as suspicious; skipping"
        log.info(_msg)
        return []

    raw = await invoke_llm(build_experience_extraction_prompt(text), llm_config)
    if raw is None:
        return []

    experiences = []
    for entry in extract_json_array(raw):
        if not isinstance(entry, dict):
            continue
        experiences.append(
            ExtractedExperience(
                **{
                    field: str(entry[field]) if entry.get(field) else None
                    for field in ExtractedExperience.model_fields
                }
            )
        )
    return experiences
