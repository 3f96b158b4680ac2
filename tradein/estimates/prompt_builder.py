"""
Prompt construction for trade-in estimates.

Builds the appraisal instruction sent to Gemini: the boat details as
submitted, the dealership's most similar past trade-ins as grounding, and the
exact JSON shape the reply must take. Output depends only on the inputs.
"""

import textwrap

from tradein.estimates.schemas import BoatProfile
from tradein.estimates.similarity import ScoredRecord

NO_SIMILAR_TRADES_NOTICE = "No similar historical trades found in our database."

ESTIMATE_JSON_FORMAT = textwrap.dedent("""\
    ```json
    {
      "low": 0,
      "high": 0,
      "reasoning": "",
      "comparables": [
        { "make": "", "model": "", "year": 0, "price": 0, "source": "" }
      ],
      "valueAddingFeatures": [""],
      "potentialDeductions": [""],
      "leadQuality": "Medium"
    }
    ```""")


def build_system_instruction(dealership_name: str, country: str = "Canada") -> str:
    """System instruction for the appraisal model."""
    return (
        f"You are a marine vehicle appraisal expert for {dealership_name}, a boat "
        f"dealership in {country}. Your primary goal is to provide an accurate, "
        "data-driven trade-in estimate to a customer. You must be professional, "
        "transparent, and manage expectations. Always ground your estimate in the "
        "provided historical data and current market comparables found via Google "
        "Search. Your final response must strictly be the JSON object as requested. "
        "Do not add any conversational text outside of the JSON structure."
    )


def _format_amount(value: float) -> str:
    # As written in the spreadsheet: 18500, not 18500.0
    return str(int(value)) if value.is_integer() else str(value)


def build_historical_context(similar_trades: list[ScoredRecord], currency: str) -> str:
    """Describe the similar trades, or say there are none."""
    if not similar_trades:
        return NO_SIMILAR_TRADES_NOTICE

    lines = [
        "Here are some similar, real-world trade-ins this dealership has made "
        "recently. Use these as a primary grounding for your estimate:"
    ]
    for trade in similar_trades:
        record = trade.record
        lines.append(
            f"- {record.year} {record.make} {record.model} ({record.engine_hp}HP): "
            f"Valued at ${_format_amount(record.trade_in_value)} {currency}"
        )
    return "\n".join(lines)


def _boat_details(profile: BoatProfile) -> list[str]:
    horsepower = (
        f"{profile.horsepower} HP" if profile.horsepower is not None else "Not provided"
    )
    engine_hours = (
        f"{profile.engine_hours} hours"
        if profile.engine_hours is not None
        else "Not provided"
    )
    lines = [
        f"- **Boat Type:** {profile.boat_type.value}",
        f"- **Year:** {profile.year}",
        f"- **Make:** {profile.make}",
        f"- **Model:** {profile.model}",
        f"- **Engine Horsepower:** {horsepower}",
        f"- **Engine Hours:** {engine_hours}",
        f"- **Includes Trailer:** {'Yes' if profile.trailer else 'No'}",
        f"- **Cosmetic Condition:** {profile.cosmetic_condition.value}",
        f"- **Mechanical Condition:** {profile.mechanical_condition.value}",
    ]
    if profile.hin:
        lines.append(f"- **HIN:** {profile.hin}")
    if profile.engine_make:
        lines.append(f"- **Engine Make:** {profile.engine_make}")
    return lines


def build_estimate_prompt(
    profile: BoatProfile,
    similar_trades: list[ScoredRecord],
    dealership_name: str = "Legend Boats",
    currency: str = "CAD",
    country: str = "Canada",
) -> str:
    """Assemble the full estimate prompt."""
    instructions = [
        f"1.  **Estimate Value:** Provide a 'low' and 'high' integer value in {currency}. "
        "This range should reflect what a dealer would realistically offer, not the "
        "private sale price.",
        "2.  **Reasoning:** Write a brief, customer-facing paragraph explaining the "
        "rationale behind your estimate. Mention the key factors you considered "
        "(e.g., market demand, age, hours, condition).",
        "3.  **Market Comparables:** Use Google Search to find 2-3 current, publicly "
        f"listed comparable boats for sale in {country}. Provide the make, model, "
        "year, price, and the source URL for each.",
        "4.  **Value Factors:**",
        "    - List 2-4 positive attributes as 'valueAddingFeatures' (e.g., \"Low "
        "engine hours for its age,\" \"Popular and sought-after model\").",
        "    - List 2-4 potential issues as 'potentialDeductions' (e.g., \"Cosmetic "
        "condition implies some reconditioning costs,\" \"High engine hours may "
        "require more thorough inspection\").",
        "5.  **Lead Quality:** Assess the sales lead quality as 'High', 'Medium', or "
        "'Low'. A 'High' quality lead would be a popular, late-model boat in good "
        "condition.",
    ]

    sections = [
        "Analyze the following used boat details to provide a realistic 'ballpark' "
        f"trade-in value range for a {dealership_name} dealership in {country}. The "
        "final output must be a single JSON object, enclosed in a markdown code fence "
        "(```json ... ```).",
        "**User Provided Boat Details:**\n" + "\n".join(_boat_details(profile)),
        "**Dealership's Historical Data (Primary Grounding):**\n"
        + build_historical_context(similar_trades, currency),
        "**Instructions:**\n" + "\n".join(instructions),
        "**JSON Output Format:**\n" + ESTIMATE_JSON_FORMAT,
    ]
    return "\n\n".join(sections)
