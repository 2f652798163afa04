"""Tests for answer sanitizing and query normalization."""

import pytest

from app.services import fallback_templates as templates
from app.utils.text_sanitizer import (
    DISCLAIMER_REPLACEMENT,
    normalize_query,
    sanitize_response,
)

DISCLAIMER = (
    "Please refer to the official policy document or contact the relevant "
    "authorities for precise rebate figures."
)


def test_normalize_query_trims_and_lowercases() -> None:
    assert normalize_query("  Road TAX \n") == "road tax"


def test_normalize_query_handles_none() -> None:
    assert normalize_query(None) == ""


def test_strips_emphasis_markup() -> None:
    assert sanitize_response("**Bold** and *italic*") == "Bold and italic"


def test_replaces_disclaimer() -> None:
    text = f"Subsidy is Rs 10,000. {DISCLAIMER}"

    assert sanitize_response(text) == f"Subsidy is Rs 10,000. {DISCLAIMER_REPLACEMENT}"


def test_replaces_disclaimer_case_insensitive_without_period() -> None:
    text = DISCLAIMER.upper().rstrip(".")

    assert sanitize_response(text) == DISCLAIMER_REPLACEMENT


def test_disclaimer_hidden_by_markup_is_replaced() -> None:
    text = "**Please refer to the official policy document** or contact the relevant authorities for precise rebate figures."

    assert sanitize_response(text) == DISCLAIMER_REPLACEMENT


def test_replaces_every_disclaimer() -> None:
    text = f"{DISCLAIMER} {DISCLAIMER}"

    assert sanitize_response(text) == f"{DISCLAIMER_REPLACEMENT} {DISCLAIMER_REPLACEMENT}"


def test_trims_whitespace() -> None:
    assert sanitize_response("\n  answer  \n") == "answer"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "plain text",
        "**x** * y *",
        DISCLAIMER,
        f"* {DISCLAIMER} *",
        f"{DISCLAIMER}{DISCLAIMER}",
        templates.ROAD_TAX_TEMPLATE,
        templates.CAPABILITY_MENU_TEMPLATE,
    ],
)
def test_sanitize_is_idempotent(text: str) -> None:
    once = sanitize_response(text)

    assert sanitize_response(once) == once
