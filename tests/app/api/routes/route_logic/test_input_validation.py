import pytest
from fastapi import HTTPException

from resume_builder.app.api.routes.route_logic.input_validation import (
    count_words,
    validate_prompt_length,
)


def test_count_words():
    assert count_words("") == 0
    assert count_words("  one   two\nthree\t") == 3


def test_validate_prompt_length_accepts_limits():
    validate_prompt_length(" ".join(["word"] * 80), max_words=80, max_chars=600)


def test_validate_prompt_length_too_many_words():
    with pytest.raises(HTTPException) as exc_info:
        validate_prompt_length(" ".join(["w"] * 81), max_words=80, max_chars=600)
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Please keep your description under 80 words."


def test_validate_prompt_length_too_many_characters():
    with pytest.raises(HTTPException) as exc_info:
        validate_prompt_length("x" * 601, max_words=80, max_chars=600)
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Please keep your description under 600 characters."
