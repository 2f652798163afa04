"""Keyword-based fallback answers for when the completion provider is unavailable.

The responder is deterministic and has no external dependencies, so the chat
endpoint can always produce a useful answer. Prompts are matched against an
ordered list of topic rules; the first matching rule wins. Several rules
overlap (e.g. "road tax subsidy" matches both the road tax and the purchase
subsidy rules), so the order of ``FALLBACK_RULES`` is part of the behavior.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from app.services import fallback_templates as templates
from app.utils.text_sanitizer import normalize_query, sanitize_response

logger = logging.getLogger(__name__)

GREETING_TOKENS = frozenset({"hello", "hi", "hey", "help"})

GREETING_TOPIC = "greeting"


@dataclass(frozen=True)
class FallbackRule:
    """A topic matcher bound to a canned response."""

    topic: str
    pattern: re.Pattern[str]
    template: str

    def matches(self, query: str) -> bool:
        return self.pattern.search(query) is not None


def _rule(topic: str, pattern: str, template: str) -> FallbackRule:
    return FallbackRule(topic=topic, pattern=re.compile(pattern, re.IGNORECASE), template=template)


# Priority order. Do not sort or deduplicate: overlaps resolve by position.
FALLBACK_RULES: tuple[FallbackRule, ...] = (
    _rule(
        "road_tax",
        r"road\s*tax|tax.*waiver|waiver|registration.*fee|exemption|motor.*vehicle.*tax",
        templates.ROAD_TAX_TEMPLATE,
    ),
    _rule(
        "purchase_subsidy",
        r"subsidy|subsidies|incentive|discount|purchase.*benefit|buyer|consumer|demand.*side"
        r"|2.*wheel|3.*wheel|4.*wheel|scooter|car",
        templates.PURCHASE_SUBSIDY_TEMPLATE,
    ),
    _rule(
        "manufacturing",
        r"manufactur|msme|industry|factory|production|supply.*side|plant|capital"
        r"|interest.*subsidy|sgst|unit|investment",
        templates.MANUFACTURING_TEMPLATE,
    ),
    _rule(
        "charging",
        r"charging|charger|station|infrastructure|equipment|battery.*swap|connector|facilities"
        r"|power|electric.*supply",
        templates.CHARGING_TEMPLATE,
    ),
    _rule(
        "scrappage",
        r"scrap|old.*vehicle|replace|retire|end.*of.*life|exchange|junk",
        templates.SCRAPPAGE_TEMPLATE,
    ),
    _rule(
        "application",
        r"apply|application|how.*to|procedure|process|steps|documentation|documents|eligibility|portal",
        templates.APPLICATION_TEMPLATE,
    ),
    _rule(
        "policy_overview",
        r"policy|overview|detail|summary|vision|goal|objective|about|general.*information"
        r"|validity|duration",
        templates.POLICY_OVERVIEW_TEMPLATE,
    ),
)


class FallbackResponder:
    """Select a canned policy answer for a free-text prompt.

    Attributes:
        rules: Ordered topic rules, evaluated first to last.
    """

    def __init__(self, rules: tuple[FallbackRule, ...] = FALLBACK_RULES) -> None:
        self.rules = rules

    def _select(self, query: str) -> tuple[str | None, str]:
        if query in GREETING_TOKENS:
            return GREETING_TOPIC, templates.GREETING_TEMPLATE

        for rule in self.rules:
            if rule.matches(query):
                return rule.topic, rule.template

        return None, templates.CAPABILITY_MENU_TEMPLATE

    def match_topic(self, prompt: str | None) -> str | None:
        """Return the topic that would answer ``prompt``.

        Returns:
            "greeting", a rule topic, or None when the capability menu applies.
        """
        topic, _ = self._select(normalize_query(prompt))
        return topic

    def respond(self, prompt: str | None) -> str:
        """Return a sanitized canned answer; never empty, never raises."""
        topic, template = self._select(normalize_query(prompt))

        logger.info(
            "fallback.selected",
            extra={"topic": topic or "capability_menu"},
        )
        return sanitize_response(template)
