"""
UserCode Value Object - Opaque per-user secret used instead of a session.

The code identifies the acting user of a request and is never logged.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserCode:
    value: str  # auth code, presented as opaque string

    def __str__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return bool(self.value)
