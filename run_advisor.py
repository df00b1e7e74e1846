"""Run the FinSight advisory pipeline or the advisory chat from the command line.

Usage:
    python run_advisor.py --profile profile.json                 # allocation report
    python run_advisor.py --profile profile.json --years 20      # custom horizon
    python run_advisor.py --profile profile.json --output out.json
    python run_advisor.py --ask "How risky is my portfolio?"     # one chat reply
    python run_advisor.py --chat                                 # interactive chat
"""

import argparse
import json
import logging
import math
import os
import sys
from pathlib import Path
from typing import Optional

sys.path.insert(0, str(Path(__file__).parent / "src"))

from dotenv import load_dotenv
load_dotenv()

from finsight_agents.agents.chat_assistant import send_message, start_chat
from finsight_agents.agents.portfolio_advisor import run_advisory_pipeline
from finsight_agents.config.constants import (
    DEFAULT_HORIZON_YEARS,
    DEFAULT_RISK_FREE_RATE,
    HORIZON_YEARS_MAX,
    HORIZON_YEARS_MIN,
    RISK_FREE_RATE_ENV_VAR,
)
from finsight_agents.exceptions import ConfigurationError, ValidationError
from finsight_agents.schemas.advisory_output import AdvisoryReport
from finsight_agents.tools.intent_responder import QUICK_SUGGESTIONS, respond_to_message
from finsight_agents.tools.profile_validator import build_profile


# ---------------------------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------------------------

def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="FinSight Advisor — asset allocation and advisory chat",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
examples:
  python run_advisor.py --profile profile.json             allocation report
  python run_advisor.py --profile profile.json --years 20  20-year projection
  python run_advisor.py --ask "should I buy bonds?"        one chat reply
  python run_advisor.py --chat                             interactive chat
""",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "--profile", metavar="FILE",
        help="JSON file with the financial profile form fields",
    )
    mode.add_argument("--ask", metavar="TEXT", help="Answer a single chat message")
    mode.add_argument("--chat", action="store_true", help="Start an interactive chat session")
    parser.add_argument(
        "--years", type=int, default=DEFAULT_HORIZON_YEARS,
        help=f"Projection horizon in years, {HORIZON_YEARS_MIN}-{HORIZON_YEARS_MAX} "
             f"(default: {DEFAULT_HORIZON_YEARS})",
    )
    parser.add_argument(
        "--risk-free-rate", type=float, default=None,
        help=f"Annual risk-free rate %% for the Sharpe ratio "
             f"(default: ${RISK_FREE_RATE_ENV_VAR} or {DEFAULT_RISK_FREE_RATE})",
    )
    parser.add_argument("--output", metavar="FILE", help="Write the report as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable INFO logging")
    args = parser.parse_args(argv)

    if not HORIZON_YEARS_MIN <= args.years <= HORIZON_YEARS_MAX:
        parser.error(f"--years must be between {HORIZON_YEARS_MIN} and {HORIZON_YEARS_MAX}")
    return args


def resolve_risk_free_rate(cli_value: Optional[float]) -> float:
    """CLI flag wins, then the environment variable, then the default."""
    if cli_value is not None:
        rate, source = cli_value, "--risk-free-rate"
    else:
        env_value = os.environ.get(RISK_FREE_RATE_ENV_VAR)
        if not env_value:
            return DEFAULT_RISK_FREE_RATE
        source = RISK_FREE_RATE_ENV_VAR
        try:
            rate = float(env_value)
        except ValueError:
            raise ConfigurationError(
                f"{source} must be a number, got {env_value!r}"
            ) from None
    if not math.isfinite(rate):
        raise ConfigurationError(f"{source} must be finite, got {rate}")
    return rate


# ---------------------------------------------------------------------------
# Output Formatting
# ---------------------------------------------------------------------------

def format_report(report: AdvisoryReport) -> str:
    m = report.metrics
    p = report.projection
    lines = [
        "=== FinSight Advisory Report ===",
        f"Analysis date: {report.analysis_date}",
        "",
    ]
    for card in report.summary_cards:
        lines.append(f"  {card.title:<18} {card.value}")

    lines += ["", f"Allocation ({report.tier.value}):"]
    for a in report.dollar_allocation:
        lines.append(f"  {a.name:<22} {a.weight_pct:>3}%   ${a.amount:>14,.2f}")

    sharpe = f"{m.display_sharpe:.2f}" if m.display_sharpe is not None else "n/a"
    lines += [
        "",
        "Metrics:",
        f"  Expected return   {m.display_expected_return:.1f}%",
        f"  Portfolio risk    {m.display_risk:.1f}%",
        f"  Sharpe ratio      {sharpe}  (risk-free {m.risk_free_rate}%)",
    ]
    if p.projected_value is not None:
        lines.append(
            f"  Projected value   ${p.projected_value:,.2f} after {p.horizon_years} years"
        )
    else:
        lines.append(f"  Projected value   n/a after {p.horizon_years} years")

    if report.investment_to_income_pct is not None:
        lines.append(f"  Investment/income {report.investment_to_income_pct:.1f}%")

    lines += ["", "Alerts:"]
    lines += [f"  [{a.kind}] {a.title}: {a.message}" for a in report.alerts]
    lines += ["", "Key insights:"]
    lines += [f"  ({k.impact}) {k.title}: {k.description}" for k in report.key_insights]
    if report.issues:
        lines += ["", "Issues:"]
        lines += [f"  [{i.severity.value}] {i.error_type}: {i.message}" for i in report.issues]
    lines += ["", report.summary]
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------

def run_profile(profile_path: str, years: int, risk_free_rate: float,
                output: Optional[str] = None) -> int:
    path = Path(profile_path)
    if not path.exists():
        print(f"ERROR: Profile file not found: {path}")
        return 1
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        print(f"ERROR: Profile file is not valid JSON: {path} ({e})")
        return 2
    try:
        profile = build_profile(raw)
    except ValidationError as e:
        print(f"ERROR: {e.message}")
        return 2

    report = run_advisory_pipeline(profile, horizon_years=years, risk_free_rate=risk_free_rate)
    print(format_report(report))

    if output:
        out_path = Path(output)
        out_path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
        print(f"\nSaved: {out_path}")
    return 0


def run_chat() -> int:
    transcript = start_chat()
    print(f"Assistant: {transcript.last.content}")
    print(f"(try: {' | '.join(QUICK_SUGGESTIONS)}; empty line or Ctrl-D to quit)")
    while True:
        try:
            text = input("You: ")
        except EOFError:
            break
        if not text.strip():
            break
        transcript = send_message(transcript, text)
        print(f"Assistant: {transcript.last.content}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.ask is not None:
        print(respond_to_message(args.ask))
        return 0
    if args.chat:
        return run_chat()
    try:
        risk_free_rate = resolve_risk_free_rate(args.risk_free_rate)
    except ConfigurationError as e:
        print(f"ERROR: {e.message}")
        return 2
    return run_profile(
        args.profile,
        years=args.years,
        risk_free_rate=risk_free_rate,
        output=args.output,
    )


if __name__ == "__main__":
    sys.exit(main())
