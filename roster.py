# roster.py
"""
Roster editing helpers.

Hosts collect player names from free text (one per line or comma separated)
and keep the roster as an ordered list of unique names.
"""

import logging
import re
from typing import Iterable, Sequence

from app_types import PlayerName
from exceptions import ValidationError

logger = logging.getLogger("app.roster")

_NAME_SEPARATORS = re.compile(r"[,\n]")


def parse_player_names(text: str) -> list[PlayerName]:
    """Splits text on commas and newlines, dropping blanks and repeats."""
    names: list[PlayerName] = []
    for raw in _NAME_SEPARATORS.split(text):
        name = raw.strip()
        if name and name not in names:
            names.append(name)
    return names


def add_players(
    roster: Sequence[PlayerName], names: Iterable[PlayerName]
) -> list[PlayerName]:
    """Returns a new roster with the names not already present appended."""
    updated = list(roster)
    for name in names:
        name = name.strip()
        if name and name not in updated:
            updated.append(name)
    logger.info(f"Added {len(updated) - len(roster)} player(s) to the roster")
    return updated


def remove_player(roster: Sequence[PlayerName], name: PlayerName) -> list[PlayerName]:
    """
    Returns a new roster without the given player.

    Raises:
        ValidationError: If the player is not on the roster.
    """
    if name not in roster:
        raise ValidationError(f"Player '{name}' not found")
    return [p for p in roster if p != name]
