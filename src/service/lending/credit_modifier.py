"""
Credit Modifier derivation for the Loan Decision Engine.

Customers are bucketed by the last two digits of their personal code:
    Debt      - 00...74  (no credit)
    Segment 1 - 75...84
    Segment 2 - 85...94
    Segment 3 - 95...99
"""

from .personal_code import get_segment
from .settings import LendingSettings, lending_settings


def credit_modifier_for_segment(
    segment: int,
    settings: LendingSettings = lending_settings,
) -> int:
    """
    Map a segment value (0-99) to its credit modifier.

    Args:
        segment: Last two digits of a personal code
        settings: Lending settings (uses defaults if not provided)

    Returns:
        Credit modifier, 0 for customers with debt
    """
    if segment < settings.segment_1_floor:
        return 0
    elif segment < settings.segment_2_floor:
        return settings.segment_1_credit_modifier
    elif segment < settings.segment_3_floor:
        return settings.segment_2_credit_modifier

    return settings.segment_3_credit_modifier


def credit_modifier_for(
    personal_code: str,
    settings: LendingSettings = lending_settings,
) -> int:
    """Credit modifier for an already validated personal code."""
    return credit_modifier_for_segment(get_segment(personal_code), settings)
