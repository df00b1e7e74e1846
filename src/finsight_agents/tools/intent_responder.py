"""
Chat Assistant Tool: Intent Responder
FinSight Advisor

Stateless keyword dispatcher for the advisory chat. The utterance is
case-folded and checked against an ordered list of IntentRules; the first
rule with a keyword substring in the text supplies the reply, otherwise the
fallback reply is returned. Prior turns are never consulted.

No LLM, no file I/O.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from finsight_agents.schemas.chat_output import IntentRule

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Rule Table (order matters: first match wins)
# ---------------------------------------------------------------------------

INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(
        name="portfolio_analysis",
        keywords=("portfolio", "analyze"),
        response=(
            "Based on your profile, I recommend a diversified portfolio with 60% "
            "stocks and 40% bonds. Your risk tolerance suggests this allocation "
            "would be optimal. Would you like me to break down specific fund "
            "recommendations?"
        ),
    ),
    IntentRule(
        name="market_trends",
        keywords=("market", "trend"),
        response=(
            "Current market analysis shows positive momentum in tech and "
            "healthcare sectors. The S&P 500 is up 12.4% YTD. However, consider "
            "the potential impact of rising interest rates on growth stocks. "
            "Would you like sector-specific insights?"
        ),
    ),
    IntentRule(
        name="risk_assessment",
        keywords=("risk",),
        response=(
            "Your risk assessment indicates a moderate risk tolerance. This means "
            "you can handle some volatility for potentially higher returns. I "
            "recommend a mix of index funds and blue-chip stocks. Want me to "
            "suggest specific investments?"
        ),
    ),
    IntentRule(
        name="investment_options",
        keywords=("invest", "buy"),
        response=(
            "For your investment amount and timeline, I suggest starting with "
            "broad market ETFs like VTI or SPY, plus some international exposure "
            "with VXUS. Would you like specific allocation percentages and "
            "reasoning?"
        ),
    ),
    IntentRule(
        name="retirement_planning",
        keywords=("retirement", "401k"),
        response=(
            "For retirement planning, maximize your 401(k) match first, then "
            "consider a Roth IRA. Based on your age and income, you should be "
            "saving at least 15% for retirement. Need help calculating how much "
            "you'll need?"
        ),
    ),
)

FALLBACK_RESPONSE = (
    "I'd be happy to help with that! I can provide insights on investments, "
    "market analysis, portfolio optimization, risk assessment, and financial "
    "planning. Could you be more specific about what you'd like to know?"
)

GREETING = (
    "Hello! I'm your FinSight Pro AI assistant. I can help you with investment "
    "advice, market analysis, portfolio optimization, and financial planning. "
    "What would you like to know?"
)

# Canned prompts offered as one-click buttons
QUICK_SUGGESTIONS: tuple[str, ...] = (
    "Analyze my portfolio",
    "Market trends today",
    "Risk assessment",
    "Investment options",
)


# ---------------------------------------------------------------------------
# Pure Functions
# ---------------------------------------------------------------------------

def normalize_utterance(utterance: str) -> str:
    """Case-fold the utterance for substring matching."""
    return utterance.casefold()


def match_intent(
    utterance: str,
    rules: Sequence[IntentRule] = INTENT_RULES,
) -> Optional[IntentRule]:
    """
    Return the first rule whose keywords appear in the utterance.

    Args:
        utterance: raw user text.
        rules: ordered decision list (default INTENT_RULES).

    Returns:
        The firing IntentRule, or None when no rule fires.
    """
    normalized = normalize_utterance(utterance)
    for rule in rules:
        if rule.matches(normalized):
            return rule
    return None


def respond_to_message(
    utterance: str,
    rules: Sequence[IntentRule] = INTENT_RULES,
) -> str:
    """
    Reply to one chat message.

    Returns:
        The first firing rule's response, or FALLBACK_RESPONSE.
    """
    rule = match_intent(utterance, rules)
    if rule is None:
        logger.debug("No intent matched; using fallback response")
        return FALLBACK_RESPONSE
    logger.debug(f"Intent matched: {rule.name}")
    return rule.response
