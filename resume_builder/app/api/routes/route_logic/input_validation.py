import logging

from fastapi import HTTPException, status

log = logging.getLogger(__name__)


def count_words(text: str) -> int:
    """Count whitespace-separated words, ignoring empty tokens."""
    return len([word for word in text.split() if word])


def validate_prompt_length(text: str, max_words: int, max_chars: int) -> None:
    """Reject generation prompts that exceed the configured limits.

    Args:
        text (str): The prompt to check.
        max_words (int): Maximum number of words allowed.
        max_chars (int): Maximum number of characters allowed.

    Raises:
        HTTPException: 400 with a user-facing message when either limit is exceeded.

    Notes:
        1. The text is never truncated; an over-limit prompt is rejected as a whole.
        2. This check runs before any model call.

    """
    word_count = count_words(text)
    if word_count > max_words:
        _msg = f"Rejected prompt with {word_count} words (limit {max_words})"
        log.info(_msg)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Please keep your description under {max_words} words.",
        )

    if len(text) > max_chars:
        _msg = f"Rejected prompt with {len(text)} characters (limit {max_chars})"
        log.info(_msg)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Please keep your description under {max_chars} characters.",
        )
