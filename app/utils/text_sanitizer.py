import re

DISCLAIMER_PATTERN = re.compile(
    r"Please refer to the official policy document or contact the relevant "
    r"authorities for precise rebate figures\.?",
    re.IGNORECASE,
)
DISCLAIMER_REPLACEMENT = "Please contact Dept. of Industries Govt of Jharkhand"


def normalize_query(text: str | None) -> str:
    """Normalize a user query for keyword matching.

    Args:
        text: Raw user input (may be None).

    Returns:
        str: Trimmed, lower-cased query.
    """
    return (text or "").strip().lower()


def sanitize_response(text: str) -> str:
    """Make an answer display-ready.

    Strips ``*`` emphasis markup, swaps the generic "contact the relevant
    authorities" disclaimer for the department contact line, and trims.
    Applying it twice gives the same result as applying it once.

    Args:
        text: Answer text from the provider or a fallback template.

    Returns:
        str: Sanitized text.
    """
    text = text.replace("*", "")
    text = DISCLAIMER_PATTERN.sub(DISCLAIMER_REPLACEMENT, text)
    return text.strip()
