"""Heuristic gate that keeps injection attempts, code and SQL away from the model.

Input flagged here is never sent to the generative-AI endpoint; generation
answers with the generic fallback resume instead.
"""

import logging
import re

log = logging.getLogger(__name__)

SUSPICIOUS_PATTERNS = [
    # Instruction override
    re.compile(
        r"\b(?:forget|ignore|disregard)\b(?:\s+(?:all|any|the|your|my|of|everything))*\s+"
        r"(?:previous|prior|above|earlier|preceding)\b",
        re.IGNORECASE,
    ),
    # Role assumption
    re.compile(r"\bsystem\s+prompt\b", re.IGNORECASE),
    re.compile(r"\byou\s+are\b", re.IGNORECASE),
    re.compile(r"\bact\s+as\b", re.IGNORECASE),
    re.compile(r"\bpretend\s+to\s+be\b", re.IGNORECASE),
    # Fenced code blocks
    re.compile(r"```[\s\S]*?```"),
    # HTML and script injection
    re.compile(r"<\s*script", re.IGNORECASE),
    re.compile(r"javascript\s*:", re.IGNORECASE),
    re.compile(r"\bon(?:error|click)\s*=", re.IGNORECASE),
    # Programming language fragments
    re.compile(
        r"\b(?:def|function|class|import|export|const|let|var) ",
        re.IGNORECASE,
    ),
    re.compile(r"\bprint\(", re.IGNORECASE),
    re.compile(r"\bconsole\.", re.IGNORECASE),
    # SQL keywords
    re.compile(r"\b(?:select|insert|update|delete|drop|create|alter)\b", re.IGNORECASE),
    # Long runs of non-ASCII text; the product only serves English and French
    re.compile(r"[^\x00-\x7F]{10,}"),
]

SHORT_INPUT_LENGTH = 10
SHORT_INJECTION_KEYWORDS = ("ignore", "forget", "system", "you must")


def is_suspicious_input(text: str) -> bool:
    """Return True if any suspicious pattern matches the text."""
    for pattern in SUSPICIOUS_PATTERNS:
        if pattern.search(text):
            _msg = f"Input matched suspicious pattern {pattern.pattern!r}"
            log.info(_msg)
            return True
    return False


def is_short_injection_attempt(text: str) -> bool:
    """Return True for very short text carrying an injection keyword.

    Catches inputs like "ignore" or "system" that are too short to trip the
    phrase patterns in `SUSPICIOUS_PATTERNS`.
    """
    if len(text) >= SHORT_INPUT_LENGTH:
        return False
    lowered = text.lower()
    return any(keyword in lowered for keyword in SHORT_INJECTION_KEYWORDS)


def should_block(text: str) -> bool:
    """Decide whether text must be kept away from the generative-AI endpoint.

    Args:
        text (str): The user's free-text description.

    Returns:
        bool: True if either heuristic flags the text.

    """
    return is_suspicious_input(text) or is_short_injection_attempt(text)
