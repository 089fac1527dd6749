"""
Wish - A single wish-list entry of a participant.

Opaque to the room rules; carried along so read queries can return it.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Wish:
    name: str
    info_link: Optional[str] = None

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Wish name cannot be empty")
