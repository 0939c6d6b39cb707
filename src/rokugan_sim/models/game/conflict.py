"""Conflict record for the conflict phase."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .player import Player
from ..cards.draw_card import DrawCard


class ConflictType(Enum):
    MILITARY = "military"
    POLITICAL = "political"


@dataclass(eq=False)
class Conflict:
    """A conflict in progress between an attacker and a defender."""
    attacking_player: Player
    defending_player: Optional[Player]
    conflict_type: ConflictType = ConflictType.MILITARY
    attackers: List[DrawCard] = field(default_factory=list)
    defenders: List[DrawCard] = field(default_factory=list)
    winner: Optional[Player] = None
