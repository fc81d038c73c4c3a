"""
Mood Value Mapping.

Maps free-text mood labels to a numeric valence on a fixed 1-10 scale.
Labels are matched case-insensitively; anything unknown is treated as
neutral (5).
"""

from types import MappingProxyType
from typing import Optional

NEUTRAL_MOOD_VALUE = 5
DEFAULT_MOOD_EMOJI = "😊"

MOOD_VALUES = MappingProxyType({
    # Positive moods (7-9)
    "very happy": 9,
    "love": 9,
    "happy": 8,
    "excited": 8,
    "energetic": 8,
    "content": 8,
    "playful": 8,
    "proud": 8,
    "cool": 8,
    "grateful": 8,
    "hopeful": 8,
    "peaceful": 7,
    "calm": 7,
    "good": 7,
    "relieved": 7,
    "surprised": 7,

    # Neutral moods (5-6)
    "okay": 6,
    "neutral": 5,
    "thoughtful": 5,

    # Negative moods (2-4)
    "sad": 4,
    "tired": 4,
    "sleepy": 4,
    "lonely": 3,
    "anxious": 3,
    "worried": 3,
    "confused": 3,
    "very sad": 3,
    "frowning": 3,
    "disappointed": 3,
    "stressed": 2,
    "angry": 2,
    "frustrated": 2,
    "determined": 2,  # usually logged under pressure
    "sick": 2,
    "embarrassed": 2,
})

# Emoji shown next to each selectable mood in the mood picker
MOOD_EMOJI = MappingProxyType({
    "happy": "😊",
    "sad": "😢",
    "frowning": "😞",
    "angry": "😠",
    "neutral": "😐",
    "excited": "🤩",
    "anxious": "😰",
    "calm": "😌",
    "tired": "😴",
    "confused": "😕",
    "grateful": "🙏",
    "love": "🥰",
    "stressed": "😓",
    "peaceful": "☺️",
    "frustrated": "😤",
    "hopeful": "😇",
    "lonely": "😔",
    "proud": "😎",
    "worried": "😟",
    "content": "😄",
    "surprised": "😲",
    "embarrassed": "😳",
    "sick": "🤒",
    "cool": "😎",
    "sleepy": "😪",
    "relieved": "😮‍💨",
    "disappointed": "😞",
    "thoughtful": "🤔",
    "playful": "😜",
    "determined": "😤",
})


def _normalize(label: Optional[str]) -> str:
    if not isinstance(label, str):
        return ""
    return label.strip().lower()


def mood_value(label: Optional[str]) -> int:
    """
    Map a mood label to its 1-10 valence.

    Args:
        label: Free-text mood label (any case, may be empty or None)

    Returns:
        Value from the lookup table, or NEUTRAL_MOOD_VALUE when unknown
    """
    return MOOD_VALUES.get(_normalize(label), NEUTRAL_MOOD_VALUE)


def mood_emoji(label: Optional[str]) -> str:
    """Emoji for a mood label, falling back to a smiley."""
    return MOOD_EMOJI.get(_normalize(label), DEFAULT_MOOD_EMOJI)


def mood_table() -> list[dict]:
    """All known moods with their value and emoji, ordered by value descending."""
    return [
        {"mood": label, "value": value, "emoji": mood_emoji(label)}
        for label, value in sorted(MOOD_VALUES.items(), key=lambda item: -item[1])
    ]
