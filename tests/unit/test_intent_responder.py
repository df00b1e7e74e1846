"""
Intent Responder — Pure Function Tests
Level 1: Pure function tests, no LLM calls, no file I/O.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from finsight_agents.schemas.chat_output import IntentRule
from finsight_agents.tools.intent_responder import (
    FALLBACK_RESPONSE,
    GREETING,
    INTENT_RULES,
    QUICK_SUGGESTIONS,
    match_intent,
    normalize_utterance,
    respond_to_message,
)


def _rule(name: str) -> IntentRule:
    return next(r for r in INTENT_RULES if r.name == name)


# ---------------------------------------------------------------------------
# TestRuleTable
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestRuleTable:

    def test_rule_order(self):
        assert [r.name for r in INTENT_RULES] == [
            "portfolio_analysis",
            "market_trends",
            "risk_assessment",
            "investment_options",
            "retirement_planning",
        ]

    def test_keywords_are_casefolded(self):
        for rule in INTENT_RULES:
            assert all(kw == kw.casefold() for kw in rule.keywords)

    def test_uppercase_keyword_rejected(self):
        with pytest.raises(ValidationError):
            IntentRule(name="bad", keywords=("Stocks",), response="x" * 30)

    def test_empty_keywords_rejected(self):
        with pytest.raises(ValidationError):
            IntentRule(name="bad", keywords=(), response="x" * 30)

    def test_greeting_and_suggestions(self):
        assert "FinSight" in GREETING
        assert len(QUICK_SUGGESTIONS) == 4


# ---------------------------------------------------------------------------
# TestRespondToMessage
# ---------------------------------------------------------------------------

@pytest.mark.schema
class TestRespondToMessage:

    def test_portfolio_question(self):
        reply = respond_to_message("Can you analyze my portfolio?")
        assert "diversified portfolio" in reply
        assert reply == _rule("portfolio_analysis").response

    def test_unrelated_text_gets_fallback(self):
        assert respond_to_message("zzz unrelated text") == FALLBACK_RESPONSE

    def test_risk_keyword(self):
        assert respond_to_message("risk please") == _rule("risk_assessment").response

    def test_case_insensitive(self):
        assert respond_to_message("MARKET TRENDS TODAY") == _rule("market_trends").response

    def test_substring_match(self):
        # "investments" contains "invest"
        assert respond_to_message("any good investments?") == _rule("investment_options").response

    def test_retirement_keywords(self):
        assert respond_to_message("my 401K plan") == _rule("retirement_planning").response
        assert respond_to_message("Retirement ideas") == _rule("retirement_planning").response

    def test_empty_text_gets_fallback(self):
        assert respond_to_message("") == FALLBACK_RESPONSE

    @pytest.mark.parametrize("text", [
        "Analyze my portfolio",
        "Market trends today",
        "Risk assessment",
        "Investment options",
    ])
    def test_quick_suggestions_never_fall_back(self, text):
        assert respond_to_message(text) != FALLBACK_RESPONSE


# ---------------------------------------------------------------------------
# TestFirstMatchWins
# ---------------------------------------------------------------------------

@pytest.mark.behavior
class TestFirstMatchWins:

    def test_portfolio_beats_risk(self):
        assert match_intent("what is the risk of my portfolio").name == "portfolio_analysis"

    def test_market_beats_invest(self):
        assert match_intent("should I invest in this market").name == "market_trends"

    def test_risk_beats_retirement(self):
        assert match_intent("retirement risk").name == "risk_assessment"

    def test_no_match_returns_none(self):
        assert match_intent("hello there") is None

    def test_custom_rule_order_respected(self):
        first = IntentRule(name="a", keywords=("stock",), response="Rule A " + "x" * 20)
        second = IntentRule(name="b", keywords=("stock",), response="Rule B " + "x" * 20)
        assert respond_to_message("stock", rules=(first, second)).startswith("Rule A")
        assert respond_to_message("stock", rules=(second, first)).startswith("Rule B")

    def test_stateless(self):
        respond_to_message("portfolio")
        assert respond_to_message("zzz") == FALLBACK_RESPONSE

    def test_normalize_casefolds(self):
        assert normalize_utterance("RiSk") == "risk"
