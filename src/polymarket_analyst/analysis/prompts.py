"""Prompt templates for single-event analysis and multi-event batch scans."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from polymarket_analyst.constants import MISPRICING_THRESHOLD_PCT, VERDICTS

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import date

    from .records import EventRecord

ANALYSIS_PROMPT_TEMPLATE = """You are an expert market analyst evaluating prediction market odds. \
Today's date is {today}. Analyze this Polymarket event and determine if the current odds \
seem mispriced.

{context}
IMPORTANT: Look at the end date carefully - this market may resolve very soon \
(within weeks/days). Consider:
- The current real-world facts that will decide how this market resolves
- Recent developments and trends relevant to each outcome
- How much would need to change in the remaining time for each outcome to happen
- Whether such a change is realistic given current momentum

Please provide:
1. **Current Reality Check**: What are the relevant facts right now? Who or what is leading?
2. **Your Fair Probability Estimate**: What do you think the true probability should be \
for each outcome?
3. **Discrepancy Analysis**: Compare your estimates to the current market prices. \
Flag any that look wrong.
4. **Verdict**: {verdicts}
5. **If mispriced**: Which bet looks attractive and why?

Be direct and specific with numbers. No fluff."""

SCAN_RESPONSE_SHAPE = """{
  "mispriced": [
    {
      "eventId": "id",
      "eventTitle": "title",
      "slug": "slug",
      "marketQuestion": "specific market question",
      "currentOdds": "e.g., Yes: 75%, No: 25%",
      "fairOdds": "e.g., Yes: 40%, No: 60%",
      "discrepancy": "percentage difference",
      "reasoning": "brief explanation",
      "confidence": "High/Medium/Low",
      "recommendation": "BUY YES / BUY NO / etc"
    }
  ],
  "summary": "brief overall summary of findings"
}"""

SCAN_PROMPT_TEMPLATE = """You are an expert market analyst scanning prediction markets for \
mispriced odds. Review these Polymarket events and identify any that appear significantly \
mispriced (>{threshold}% discrepancy between market odds and your fair value estimate).

MARKETS TO SCAN:
{projection}

For each market, the outcomePrices array contains the current price for each outcome \
(0-1 scale, representing probability).

RESPOND IN THIS JSON FORMAT ONLY:
{response_shape}

Only include markets where you have HIGH confidence in a >{threshold}% mispricing. \
Be selective and rigorous."""


def compose_analysis_prompt(context: str, today: date) -> str:
    """Build the single-event deep-analysis prompt.

    Args:
        context: Output of `build_context` for the event.
        today: Date the engine should reason from (passed explicitly, never read
            from the clock here).
    """
    return ANALYSIS_PROMPT_TEMPLATE.format(
        today=today.isoformat(),
        context=context,
        verdicts=" / ".join(VERDICTS),
    )


def build_scan_projection(events: Iterable[EventRecord]) -> list[dict[str, Any]]:
    """Project events into the compact summary sent with a batch scan.

    Description and end date are left out to bound prompt size. Events without
    any markets are dropped; input order is preserved.
    """
    projection: list[dict[str, Any]] = []
    for event in events:
        if not event.markets:
            continue
        projection.append(
            {
                "id": event.id,
                "title": event.title,
                "slug": event.slug,
                "markets": [
                    {
                        "question": market.question or market.group_item_title,
                        "outcomes": market.outcomes,
                        "outcomePrices": market.outcome_prices,
                        "volume": market.volume,
                        "liquidity": market.liquidity,
                    }
                    for market in event.markets
                ],
            }
        )
    return projection


def compose_scan_prompt(projection: list[dict[str, Any]]) -> str:
    """Build the batch-scan prompt that requests the structured JSON reply."""
    return SCAN_PROMPT_TEMPLATE.format(
        threshold=MISPRICING_THRESHOLD_PCT,
        projection=json.dumps(projection, indent=2, ensure_ascii=False),
        response_shape=SCAN_RESPONSE_SHAPE,
    )
