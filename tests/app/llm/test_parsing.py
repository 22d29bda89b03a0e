import json

import pytest

from resume_builder.app.llm.fallbacks import get_generic_resume, get_sample_resume
from resume_builder.app.llm.models import FallbackReason, Language
from resume_builder.app.llm.parsing import (
    extract_json_array,
    extract_json_object,
    is_rejected_response,
    normalize_resume_response,
)

RESUME = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "phone": "+1 555 0100",
    "summary": "Backend engineer focused on reliable APIs.",
    "experience": [
        {
            "title": "Engineer",
            "company": "Acme",
            "period": "2020 - 2024",
            "description": "• Built billing services",
        }
    ],
    "education": [],
    "certifications": [],
    "skills": ["Python"],
}


@pytest.mark.parametrize("raw", ["", "   ", "{0}", " {0}\n"])
def test_is_rejected_response_placeholder_and_empty(raw):
    assert is_rejected_response(raw) is True


@pytest.mark.parametrize(
    "raw",
    [
        "Error: not a resume",
        "I cannot help with that",
        "The input is INVALID",
    ],
)
def test_is_rejected_response_markers(raw):
    assert is_rejected_response(raw) is True


def test_is_rejected_response_accepts_resume_json():
    assert is_rejected_response(json.dumps(RESUME)) is False


def test_extract_json_object_fenced_equals_unfenced():
    """A fenced block and a bare object parse to the same value."""
    bare = json.dumps(RESUME)
    fenced = f"Here you go:\n```json\n{bare}\n```\nThanks"
    assert extract_json_object(fenced) == extract_json_object(bare) == RESUME


def test_extract_json_object_fence_without_language():
    raw = f"```\n{json.dumps(RESUME)}\n```"
    assert extract_json_object(raw) == RESUME


def test_extract_json_object_with_surrounding_prose():
    raw = f"Sure! {json.dumps(RESUME)} Let me know."
    assert extract_json_object(raw) == RESUME


def test_extract_json_object_malformed_returns_none():
    assert extract_json_object('{"name": "Jane", "skills": [}') is None


def test_extract_json_object_non_object_returns_none():
    assert extract_json_object("[1, 2, 3]") is None


def test_extract_json_array_fenced_and_bare():
    entries = [{"title": "Engineer", "company": "Acme"}]
    bare = json.dumps(entries)
    assert extract_json_array(bare) == entries
    assert extract_json_array(f"```json\n{bare}\n```") == entries


def test_extract_json_array_malformed_returns_empty():
    assert extract_json_array("[{]") == []
    assert extract_json_array("nothing here") == []


def test_extract_json_array_object_returns_empty():
    assert extract_json_array('{"title": "Engineer"}') == []


def test_normalize_resume_response_success():
    result = normalize_resume_response(json.dumps(RESUME), Language.ENGLISH)
    assert result.fallback is False
    assert result.reason is None
    assert result.resume == RESUME


def test_normalize_resume_response_placeholder_is_generic():
    result = normalize_resume_response("{0}", Language.ENGLISH)
    assert result.fallback is True
    assert result.reason == FallbackReason.REJECTED_RESPONSE
    assert result.resume == get_generic_resume(Language.ENGLISH)


def test_normalize_resume_response_malformed_is_sample():
    result = normalize_resume_response('{"name": "Jane",,}', Language.FRENCH)
    assert result.fallback is True
    assert result.reason == FallbackReason.UNPARSEABLE_RESPONSE
    assert result.resume == get_sample_resume(Language.FRENCH)
