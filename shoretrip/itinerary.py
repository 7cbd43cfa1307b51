"""Loading the day's plan and the one mutation it allows."""

import json
from typing import Optional, Sequence

from .models import Activity


def load_itinerary(path: str) -> list[Activity]:
    """Read a JSON list of activities, keeping file order"""
    with open(path) as f:
        data = json.load(f)
    return [Activity.from_dict(item) for item in data]


def find_activity(itinerary: Sequence[Activity], activity_id: str) -> Optional[Activity]:
    for act in itinerary:
        if act.id == activity_id:
            return act
    return None


def toggle_complete(itinerary: Sequence[Activity], activity_id: str) -> Optional[Activity]:
    """Flip the completion flag; returns the activity, or None if unknown"""
    act = find_activity(itinerary, activity_id)
    if act:
        act.completed = not act.completed
    return act
