"""
Chat context construction.

After an estimate is produced, the follow-up chat is primed with a system
instruction describing the boat and the estimate, and opened with a
model-authored welcome message. Customers and staff get different wording.
"""

import textwrap

from tradein.ai.gemini.schemas import ChatMessage, ChatRole
from tradein.chat.schemas import ChatContext
from tradein.estimates.constants import Audience
from tradein.estimates.schemas import BoatProfile, Estimate


def _format_hours(profile: BoatProfile) -> str:
    if profile.engine_hours is None:
        return "unknown hours"
    return f"{profile.engine_hours} hours"


def _format_horsepower(profile: BoatProfile) -> str:
    if profile.horsepower is None:
        return "unknown HP"
    return f"{profile.horsepower}HP"


def build_customer_context(
    profile: BoatProfile,
    estimate: Estimate,
    dealership_name: str = "Legend Boats",
    currency: str = "CAD",
) -> ChatContext:
    instruction = textwrap.dedent(f"""\
        You are a helpful chat assistant for {dealership_name}. The user has just received a trade-in estimate for their boat. Your role is to answer follow-up questions about the estimate. Be concise and helpful.

        Initial Boat Context:
        - Type: {profile.boat_type.value}, Year: {profile.year}, Make: {profile.make}, Model: {profile.model}
        - Engine: {_format_horsepower(profile)}, {_format_hours(profile)}
        - Condition: {profile.cosmetic_condition.value} (Cosmetic), {profile.mechanical_condition.value} (Mechanical)
        - Initial Estimate: ${estimate.low} - ${estimate.high} {currency}

        The user may ask how changes (like engine hours, repairs, or market conditions) would affect this value. Use your general knowledge to provide reasonable adjustments or explanations. Do not provide a new formal estimate range unless explicitly asked.\
    """)
    welcome = ChatMessage(
        role=ChatRole.MODEL,
        text=(
            "Hello! I can help answer questions about your estimate for the "
            f"{profile.description}. How can I help?"
        ),
    )
    return ChatContext(system_instruction=instruction, history=[welcome])


def build_staff_context(
    profile: BoatProfile,
    estimate: Estimate,
    dealership_name: str = "Legend Boats",
    currency: str = "CAD",
) -> ChatContext:
    instruction = textwrap.dedent(f"""\
        You are a helpful chat assistant for {dealership_name} staff. The user is generating trade-in estimates.
        Initial Boat Context:
        - {profile.description}
        - Estimate: ${estimate.low} - ${estimate.high} {currency}
        - Lead Quality: {estimate.lead_quality.value}\
    """)
    welcome = ChatMessage(
        role=ChatRole.MODEL,
        text=f"Chat initialized for the {profile.description}.",
    )
    return ChatContext(system_instruction=instruction, history=[welcome])


def build_chat_context(
    profile: BoatProfile,
    estimate: Estimate,
    audience: Audience,
    dealership_name: str = "Legend Boats",
    currency: str = "CAD",
) -> ChatContext:
    """Chat context for the given audience."""
    if audience == Audience.STAFF:
        return build_staff_context(profile, estimate, dealership_name, currency)
    return build_customer_context(profile, estimate, dealership_name, currency)
