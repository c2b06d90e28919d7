"""Random fireplace-style session title suggestions."""

import random

ADJECTIVES = (
    "Cozy",
    "Warm",
    "Crackling",
    "Peaceful",
    "Relaxing",
    "Ambient",
    "Soothing",
    "Tranquil",
    "Serene",
    "Calming",
)

NOUNS = (
    "Fireplace",
    "Hearth",
    "Flames",
    "Embers",
    "Campfire",
    "Bonfire",
    "Fire",
    "Blaze",
)

TIMES = (
    "Evening",
    "Night",
    "Morning",
    "Afternoon",
    "Winter",
    "Holiday",
    "Weekend",
    "Midnight",
)


def generate_fireplace_title(rng: random.Random | None = None) -> str:
    """Return a title like 'Cozy Hearth - Evening'."""
    rng = rng or random.Random()
    return f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS)} - {rng.choice(TIMES)}"
