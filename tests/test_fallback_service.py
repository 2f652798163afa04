"""Tests for the keyword-based fallback responder."""

import pytest

from app.services import fallback_templates as templates
from app.services.fallback_service import (
    FALLBACK_RULES,
    GREETING_TOKENS,
    FallbackResponder,
)
from app.utils.text_sanitizer import sanitize_response

# Declared priority order; overlapping prompts resolve to the earlier topic.
EXPECTED_ORDER = [
    "road_tax",
    "purchase_subsidy",
    "manufacturing",
    "charging",
    "scrappage",
    "application",
    "policy_overview",
]


@pytest.fixture
def responder() -> FallbackResponder:
    return FallbackResponder()


def test_rule_order_is_pinned() -> None:
    assert [rule.topic for rule in FALLBACK_RULES] == EXPECTED_ORDER


@pytest.mark.parametrize("prompt", ["hi", "Hello", "  HEY  ", "help"])
def test_greeting_tokens_return_greeting(responder: FallbackResponder, prompt: str) -> None:
    assert responder.respond(prompt) == sanitize_response(templates.GREETING_TEMPLATE)
    assert responder.match_topic(prompt) == "greeting"


def test_greeting_requires_exact_match(responder: FallbackResponder) -> None:
    # "hi there" is not a greeting token and matches no topic
    assert responder.match_topic("hi there") is None
    assert responder.respond("hi there") == sanitize_response(templates.CAPABILITY_MENU_TEMPLATE)


def test_greeting_tokens() -> None:
    assert GREETING_TOKENS == {"hello", "hi", "hey", "help"}


@pytest.mark.parametrize(
    ("prompt", "topic", "template"),
    [
        ("road tax", "road_tax", templates.ROAD_TAX_TEMPLATE),
        ("Is there a registration fee waiver?", "road_tax", templates.ROAD_TAX_TEMPLATE),
        ("What are 2-wheeler subsidies?", "purchase_subsidy", templates.PURCHASE_SUBSIDY_TEMPLATE),
        ("msme benefits", "manufacturing", templates.MANUFACTURING_TEMPLATE),
        ("where is the nearest charger", "charging", templates.CHARGING_TEMPLATE),
        ("scrap my old vehicle", "scrappage", templates.SCRAPPAGE_TEMPLATE),
        ("which documents are needed", "application", templates.APPLICATION_TEMPLATE),
        ("policy validity", "policy_overview", templates.POLICY_OVERVIEW_TEMPLATE),
    ],
)
def test_topic_matching(
    responder: FallbackResponder, prompt: str, topic: str, template: str
) -> None:
    assert responder.match_topic(prompt) == topic
    assert responder.respond(prompt) == sanitize_response(template)


@pytest.mark.parametrize(
    ("prompt", "expected_topic"),
    [
        # road_tax (1) beats purchase_subsidy (2)
        ("road tax and subsidy", "road_tax"),
        ("subsidy on road tax", "road_tax"),
        # purchase_subsidy (2) beats manufacturing (3): "interest subsidy" hits "subsidy" first
        ("interest subsidy for my unit", "purchase_subsidy"),
        # manufacturing (3) beats charging (4)
        ("factory power supply", "manufacturing"),
        # charging (4) beats scrappage (5)
        ("replace the charger", "charging"),
        # scrappage (5) beats application (6)
        ("how to scrap", "scrappage"),
        # application (6) beats policy_overview (7)
        ("apply under the policy", "application"),
    ],
)
def test_overlapping_prompts_resolve_by_rule_order(
    responder: FallbackResponder, prompt: str, expected_topic: str
) -> None:
    assert responder.match_topic(prompt) == expected_topic


def test_matching_is_case_insensitive(responder: FallbackResponder) -> None:
    assert responder.match_topic("ROAD TAX") == "road_tax"


def test_unmatched_prompt_returns_capability_menu(responder: FallbackResponder) -> None:
    text = responder.respond("xyz")

    assert responder.match_topic("xyz") is None
    assert text == sanitize_response(templates.CAPABILITY_MENU_TEMPLATE)


@pytest.mark.parametrize("prompt", ["", "   ", "\n\t", "?", "xyz", None])
def test_never_returns_empty(responder: FallbackResponder, prompt) -> None:
    text = responder.respond(prompt)

    assert isinstance(text, str)
    assert text.strip()


def test_responses_are_sanitized(responder: FallbackResponder) -> None:
    text = responder.respond("road tax")

    assert "*" not in text
    assert text.startswith("📋 Road Tax & Registration Fee Waivers")


def test_custom_rules_are_respected() -> None:
    responder = FallbackResponder(rules=tuple(reversed(FALLBACK_RULES)))

    assert responder.match_topic("road tax and subsidy") == "purchase_subsidy"
