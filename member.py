from __future__ import annotations

from dataclasses import dataclass, asdict


@dataclass(frozen=True)
class Member:
    """A library member. Members live in memory only."""

    member_id: int
    name: str

    def info_line(self) -> str:
        return f"[MEMBER] ID: {self.member_id}, Name: {self.name}"

    def to_dict(self) -> dict:
        return asdict(self)
