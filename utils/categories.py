from typing import Dict

CATEGORY_ICONS: Dict[str, str] = {
    "Food": "🍽️",
    "Sightseeing": "🏞️",
    "Culture": "🏛️",
    "Activity": "🏃‍♂️",
    "Shopping": "🛍️",
    "Nightlife": "🌙",
    "Travel": "✈️",
    "Relaxation": "💆‍♀️",
    "Custom": "✏️",
    "Default": "📍",
}

# substring of the lowercased label -> colour token
CATEGORY_COLORS = [
    ("food", "orange"),
    ("sight", "emerald"),
    ("culture", "rose"),
    ("activity", "blue"),
    ("shop", "pink"),
    ("night", "purple"),
    ("travel", "cyan"),
    ("relax", "teal"),
]

DEFAULT_COLOR = "slate"


def get_category_icon(category: str) -> str:
    """
    Icon of the first known category contained in the label.

    Categories are open labels, so "Street Food Tour" still maps to Food.
    """
    label = (category or "").lower()
    for key, icon in CATEGORY_ICONS.items():
        if key.lower() in label:
            return icon
    return CATEGORY_ICONS["Default"]


def get_category_color(category: str) -> str:
    label = (category or "").lower()
    for fragment, color in CATEGORY_COLORS:
        if fragment in label:
            return color
    return DEFAULT_COLOR
