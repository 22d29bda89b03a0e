import json
import logging
import re
from typing import Any

from resume_builder.app.llm.fallbacks import get_generic_resume, get_sample_resume
from resume_builder.app.llm.models import FallbackReason, GenerationResult, Language

log = logging.getLogger(__name__)

PLACEHOLDER_RESPONSE = "{0}"
REJECTION_MARKERS = ("error", "cannot", "invalid")

FENCED_OBJECT_PATTERN = re.compile(r"```(?:json)?\s*(\{[\s\S]*\})\s*```")
OBJECT_PATTERN = re.compile(r"(\{[\s\S]*\})")
FENCED_ARRAY_PATTERN = re.compile(r"```(?:json)?\s*(\[[\s\S]*\])\s*```")
ARRAY_PATTERN = re.compile(r"(\[[\s\S]*\])")


def is_rejected_response(raw: str) -> bool:
    """Check whether the model refused the request instead of writing a resume.

    Args:
        raw (str): The raw text returned by the model.

    Returns:
        bool: True for empty text, the `{0}` placeholder, or text mentioning
            "error", "cannot" or "invalid" anywhere (case-insensitive).

    """
    stripped = raw.strip()
    if not stripped or stripped == PLACEHOLDER_RESPONSE:
        return True
    lowered = stripped.lower()
    return any(marker in lowered for marker in REJECTION_MARKERS)


def _extract_span(raw: str, fenced: re.Pattern, bare: re.Pattern) -> str:
    match = fenced.search(raw) or bare.search(raw)
    if match:
        return match.group(1)
    return raw


def extract_json_object(raw: str) -> dict[str, Any] | None:
    """Locate and parse the JSON object in a model response.

    Args:
        raw (str): The raw model output.

    Returns:
        dict[str, Any] | None: The parsed object, or None if no span parses to an object.

    Notes:
        1. Prefer a fenced code block (```json ... ```) holding an object.
        2. Fall back to the greedy span from the first "{" to the last "}".
        3. Fall back to the whole text.
        4. Parse the chosen span. Malformed JSON is never repaired.

    """
    span = _extract_span(raw, FENCED_OBJECT_PATTERN, OBJECT_PATTERN)
    try:
        parsed = json.loads(span)
    except json.JSONDecodeError as e:
        _msg = f"Failed to parse model response as JSON: {e!s}"
        log.warning(_msg)
        return None

    if not isinstance(parsed, dict):
        _msg = f"Model response parsed to {type(parsed).__name__}, expected an object"
        log.warning(_msg)
        return None
    return parsed


def extract_json_array(raw: str) -> list[Any]:
    """Locate and parse the JSON array in a model response, or return []."""
    span = _extract_span(raw, FENCED_ARRAY_PATTERN, ARRAY_PATTERN)
    try:
        parsed = json.loads(span)
    except json.JSONDecodeError as e:
        _msg = f"Failed to parse model response as a JSON array: {e!s}"
        log.warning(_msg)
        return []
    return parsed if isinstance(parsed, list) else []


def normalize_resume_response(raw: str, lang: Language) -> GenerationResult:
    """Turn raw model output into the resume returned to the caller.

    Args:
        raw (str): The raw text returned by the model.
        lang (Language): The requested language, used to pick fallback content.

    Returns:
        GenerationResult: The parsed resume with `fallback=False`, or canned content
            with `fallback=True`.

    Notes:
        1. A rejected response (see `is_rejected_response`) yields the generic resume.
        2. Otherwise extract and parse the JSON object.
        3. A parse failure yields the sample resume.
        4. A parsed object is returned verbatim.

    """
    if is_rejected_response(raw):
        _msg = "Model rejected the request; returning the generic resume"
        log.info(_msg)
        return GenerationResult(
            resume=get_generic_resume(lang),
            fallback=True,
            reason=FallbackReason.REJECTED_RESPONSE,
        )

    parsed = extract_json_object(raw)
    if parsed is None:
        return GenerationResult(
            resume=get_sample_resume(lang),
            fallback=True,
            reason=FallbackReason.UNPARSEABLE_RESPONSE,
        )

    return GenerationResult(resume=parsed, fallback=False)
