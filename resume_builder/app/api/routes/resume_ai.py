import logging
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status

from resume_builder.app.api.dependencies import get_llm_config
from resume_builder.app.api.routes.route_logic.anonymous_prompts import (
    record_anonymous_prompt,
)
from resume_builder.app.api.routes.route_logic.experience_extraction import (
    store_extracted_experiences,
)
from resume_builder.app.api.routes.route_logic.input_validation import (
    validate_prompt_length,
)
from resume_builder.app.api.routes.route_models import (
    GenerateResumeRequest,
    GenerateResumeResponse,
)
from resume_builder.app.core.auth import get_optional_current_user
from resume_builder.app.core.config import Settings, get_settings
from resume_builder.app.llm.models import LLMConfig, normalize_language
from resume_builder.app.llm.orchestration import generate_resume
from resume_builder.app.models.user import User

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["generation"])


@router.post("/generate-resume")
async def generate_resume_endpoint(
    request: GenerateResumeRequest,
    background_tasks: BackgroundTasks,
    settings: Annotated[Settings, Depends(get_settings)],
    llm_config: Annotated[LLMConfig, Depends(get_llm_config)],
    current_user: Annotated[User | None, Depends(get_optional_current_user)],
) -> GenerateResumeResponse:
    """Generate a structured resume from a free-text description.

    Args:
        request (GenerateResumeRequest): The description, language and optional user id.
        background_tasks (BackgroundTasks): Runs the persistence side effect after the response.
        settings (Settings): Limits for prompt length and the anonymous log size.
        llm_config (LLMConfig): Configuration for the generative-AI endpoint.
        current_user (User | None): The authenticated user, or None for anonymous visitors.

    Returns:
        GenerateResumeResponse: The resume and whether it is fallback content.

    Raises:
        HTTPException: 400 if the description is missing or over the length limits.

    Notes:
        1. Trim and validate the description before any model call.
        2. Generate the resume; every model failure yields fallback content with a 200.
        3. Schedule a side effect: anonymous visitors have their prompt logged,
           authenticated users have experiences extracted into their profile.
        4. Side effects never change the response, and their failures are only logged.
        5. A `userId` in the body is ignored unless it names the token's user.

    Network access:
        - Up to two requests to the LLM endpoint, the second one after the response.

    """
    _msg = "generate_resume_endpoint starting"
    log.debug(_msg)

    experience = (request.experience or "").strip()
    if not experience:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Experience description is required",
        )

    validate_prompt_length(
        experience,
        max_words=settings.max_prompt_words,
        max_chars=settings.max_prompt_chars,
    )

    lang = normalize_language(request.lang)
    result = await generate_resume(experience, lang, llm_config)
    if result.fallback:
        _msg = f"Answering with fallback resume ({result.reason})"
        log.info(_msg)

    if request.user_id and (current_user is None or request.user_id != current_user.id):
        _msg = "Ignoring userId that does not match the bearer token"
        log.warning(_msg)

    if current_user is None:
        background_tasks.add_task(
            record_anonymous_prompt,
            experience,
            settings.anonymous_prompt_limit,
        )
    else:
        background_tasks.add_task(
            store_extracted_experiences,
            experience,
            current_user.id,
            llm_config,
        )

    return GenerateResumeResponse(resume=result.resume, fallback=result.fallback)
