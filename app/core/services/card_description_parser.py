"""
Card description parsing.
Extracts the audio URL, description and tags from a card's free text using
one `key: value` pair per line.
"""
from typing import List, Optional

from app.core.models.card import ParsedCardInfo


AUDIO_URL_PREFIX = "audio url:"
DESCRIPTION_PREFIX = "description:"
TAGS_PREFIX = "tags:"


def _value_after(line: str, prefix: str) -> Optional[str]:
    """Return the stripped remainder of line if it starts with prefix, ignoring case."""
    if line.lower().startswith(prefix):
        return line[len(prefix):].strip()
    return None


def extract_fields(text: Optional[str]) -> ParsedCardInfo:
    """
    Extract structured fields from a card description.

    Lines are matched against the recognised prefixes in order
    (audio url, description, tags); a later matching line overwrites an
    earlier one. Remaining non-empty lines without a colon are joined into
    the description when no explicit description was given. Anything else
    is ignored.

    Args:
        text: Newline-delimited card description, may be None

    Returns:
        ParsedCardInfo with audio_url None when no audio url line exists
    """
    result = ParsedCardInfo()

    if not text:
        return result

    description_lines: List[str] = []

    for raw_line in text.split("\n"):
        line = raw_line.strip()

        audio_url = _value_after(line, AUDIO_URL_PREFIX)
        if audio_url is not None:
            result.audio_url = audio_url
            continue

        description = _value_after(line, DESCRIPTION_PREFIX)
        if description is not None:
            result.description = description
            continue

        tags = _value_after(line, TAGS_PREFIX)
        if tags is not None:
            result.tags = tags
            continue

        if line and ":" not in line:
            description_lines.append(line)

    # An empty explicit description counts as missing
    if not result.description and description_lines:
        result.description = " ".join(description_lines)

    return result
