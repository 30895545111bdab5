"""
Classifies raw model output as a calendar-event request or free-form idea text.
"""

import json
import re
from typing import Union

from brainstormai.models.event import CalendarEventIntent, IdeaText
from brainstormai.utils.constants import CALENDAR_EVENT_TYPE
from brainstormai.utils.logger import logger

JSON_BLOCK_PATTERN = re.compile(r"```json\s*(\{.*?\})\s*```", re.DOTALL)


def classify(raw_text: str) -> Union[CalendarEventIntent, IdeaText]:
    """
    Determine whether a model response encodes a calendar event.

    Only a fenced json block holding an object with type "calendar_event" and an
    eventDetails object yields a CalendarEventIntent. Anything else, including
    malformed JSON, falls back to IdeaText carrying the untouched input.

    Args:
        raw_text: Text returned by the language model

    Returns:
        CalendarEventIntent or IdeaText
    """
    match = JSON_BLOCK_PATTERN.search(raw_text)
    if not match:
        return IdeaText(text=raw_text)

    try:
        parsed = json.loads(match.group(1))
    except json.JSONDecodeError as e:
        logger.warning(f"Model attempted JSON output, but it was invalid: {e}")
        return IdeaText(text=raw_text)

    if not isinstance(parsed, dict) or parsed.get("type") != CALENDAR_EVENT_TYPE:
        logger.warning("Model returned a JSON block that is not a calendar event")
        return IdeaText(text=raw_text)

    event_details = parsed.get("eventDetails")
    if not isinstance(event_details, dict):
        logger.warning("Calendar event JSON is missing eventDetails")
        return IdeaText(text=raw_text)

    return CalendarEventIntent(eventDetails=event_details)
