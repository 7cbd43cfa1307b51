"""Budget summary for the day."""

from typing import Sequence

from .models import Activity


def total_budget(itinerary: Sequence[Activity]) -> float:
    """Estimated spend in EUR"""
    return sum(act.price_eur for act in itinerary)


def priced_activities(itinerary: Sequence[Activity]) -> list[Activity]:
    return [act for act in itinerary if act.price_eur > 0]


def format_eur(amount: float) -> str:
    if amount == int(amount):
        return f"€{int(amount)}"
    return f"€{amount:.2f}"


def budget_lines(itinerary: Sequence[Activity]) -> list[str]:
    lines = [f"Estimated total: {format_eur(total_budget(itinerary))}"]
    for act in priced_activities(itinerary):
        lines.append(f"  {act.title:40} {act.type:12} {format_eur(act.price_eur):>8}")
    return lines
