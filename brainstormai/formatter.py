"""
Turns free-form business idea text into structured records and display text.
"""

import re
from typing import Dict, List, Optional, Tuple

from brainstormai.models.idea import FormatStatus, FormattedIdeas, IdeaRecord
from brainstormai.utils.constants import NOT_AVAILABLE

# (field, label) in the order the model is asked to write them
IDEA_FIELDS: List[Tuple[str, str]] = [
    ("name", "Idea Name"),
    ("concept", "Concept"),
    ("keyFeatures", "Key Features"),
    ("targetMarket", "Target Market"),
    ("uniqueValueProposition", "Unique Value Proposition"),
    ("monetization", "Monetization"),
    ("challenges", "Potential Challenges/Considerations"),
    ("summary", "Summary"),
]

IDEA_SPLIT_PATTERN = re.compile(r"\d+\.\s*Idea Name:", re.IGNORECASE)
WHITESPACE_PATTERN = re.compile(r"\s+")

# Markdown emphasis and bullet markers left around a captured value
RESIDUE_CHARS = " *-"
# Idea names lose these characters wherever they appear
NAME_PUNCTUATION_PATTERN = re.compile(r"[*-]")


def _label_pattern(label: str, next_label: Optional[str]) -> re.Pattern:
    if next_label is None:
        return re.compile(rf"{re.escape(label)}:\s*(.*)", re.IGNORECASE)
    return re.compile(
        rf"{re.escape(label)}:\s*(.*?)(?=\s*{re.escape(next_label)}:|$)",
        re.IGNORECASE,
    )


FIELD_PATTERNS: List[Tuple[str, re.Pattern]] = [
    (field, _label_pattern(label, IDEA_FIELDS[i + 1][1] if i + 1 < len(IDEA_FIELDS) else None))
    for i, (field, label) in enumerate(IDEA_FIELDS)
]


def extract_fields(block: str) -> Dict[str, Optional[str]]:
    """
    Extract every labelled field from one idea block.

    Each field runs from its label up to the next label in IDEA_FIELDS, the
    last one to the end of the block. Fields that are absent or empty map to None.
    The name additionally loses every "*" and "-", not only those at its edges.
    """
    fields = {}
    for field, pattern in FIELD_PATTERNS:
        match = pattern.search(block)
        value = match.group(1).strip(RESIDUE_CHARS) if match else ""
        fields[field] = value or None
    if fields["name"]:
        fields["name"] = NAME_PUNCTUATION_PATTERN.sub("", fields["name"]).strip() or None
    return fields


def split_idea_blocks(text: str) -> List[str]:
    """
    Split normalized text into idea blocks, each starting with "Idea Name:".

    Text preceding the first numbered "Idea Name:" label is not an idea and is dropped.
    """
    segments = IDEA_SPLIT_PATTERN.split(text)
    return [f"Idea Name:{segment.strip()}" for segment in segments[1:] if segment.strip()]


def parse_ideas(raw_text: str) -> List[IdeaRecord]:
    """Parse raw model text into idea records, in the order they appear."""
    cleaned_text = WHITESPACE_PATTERN.sub(" ", raw_text).strip()
    records = []
    for index, block in enumerate(split_idea_blocks(cleaned_text), start=1):
        fields = extract_fields(block)
        records.append(IdeaRecord(
            name=fields.pop("name") or f"Idea {index}",
            **{field: value or NOT_AVAILABLE for field, value in fields.items()},
        ))
    return records


def render_idea(index: int, idea: IdeaRecord) -> str:
    return (
        f"**{index}. Idea Name:** {idea.name}\n"
        f"\n"
        f"  **Concept:** {idea.concept}\n"
        f"\n"
        f"  **Key Features:** {idea.keyFeatures}\n"
        f"\n"
        f"  **Target Market:** {idea.targetMarket}\n"
        f"\n"
        f"  **Unique Value Proposition:** {idea.uniqueValueProposition}\n"
        f"\n"
        f"  **Monetization:** {idea.monetization}\n"
        f"\n"
        f"  **Potential Challenges/Considerations:** {idea.challenges}\n"
        f"\n"
        f"  **Summary:** {idea.summary}\n"
    )


def _status(records: List[IdeaRecord]) -> FormatStatus:
    content_fields = len(IDEA_FIELDS) - 1
    if not records or all(len(record.missing_fields()) >= content_fields for record in records):
        return FormatStatus.EMPTY
    if any(record.missing_fields() for record in records):
        return FormatStatus.PARTIAL
    return FormatStatus.FULL


def format_ideas(raw_text: str) -> FormattedIdeas:
    """
    Format raw model text as a list of business ideas.

    Args:
        raw_text: Free-form idea text returned by the model

    Returns:
        FormattedIdeas tagged EMPTY when no idea content could be extracted,
        PARTIAL when some fields fell back to "N/A", FULL otherwise
    """
    records = parse_ideas(raw_text)
    text = "\n---\n\n".join(
        render_idea(index, record) for index, record in enumerate(records, start=1)
    ).rstrip()
    return FormattedIdeas(status=_status(records), records=records, text=text)
