"""Kinds of item attributes: flags, item requirements and descriptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class AttributeFlag(Enum):
    """Category an item attribute belongs to."""

    ANY = auto()
    DAMAGE = auto()
    ATTACK = auto()
    DEFENSE = auto()
    DAMAGE_REDUCTION = auto()
    RESISTANCE = auto()
    STATS = auto()
    SPEED = auto()
    SKILLS = auto()
    PER_LEVEL = auto()
    DURABILITY = auto()
    QUANTITY = auto()
    MISSILE = auto()
    SOCKETS = auto()
    LEECH = auto()
    OP = auto()
    NO_MIN_MAX = auto()
    PD2_MAP = auto()


class AttributeItemReq(Enum):
    """Kind of item an attribute may only appear on."""

    WEAPON = auto()
    ARMOR = auto()
    SHIELD = auto()
    CHEST = auto()
    HELM = auto()
    THROWING = auto()
    BOWS = auto()


class AttributeConsume(Enum):
    """What to do with an attribute code met in the data."""

    KNOWN = auto()
    SKIP = auto()
    KEEP = auto()


@dataclass(frozen=True)
class AttributeDesc:
    """Description of one attribute code."""

    code: str = ""
    flags: frozenset[AttributeFlag] = field(default_factory=frozenset)
    items: frozenset[AttributeItemReq] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", frozenset(self.flags))
        object.__setattr__(self, "items", frozenset(self.items))

    def has_flag(self, flag: AttributeFlag) -> bool:
        """Whether the attribute carries ``flag``."""
        return flag in self.flags