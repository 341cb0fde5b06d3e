"""Lookup of item attribute codes and detection of mutually exclusive ones."""

from __future__ import annotations

from typing import Iterable, Iterator

from d2modgen.attribute_kinds import AttributeConsume, AttributeDesc, AttributeFlag
from d2modgen.attribute_table import base_attributes

# Later entries win when a code appears more than once.
_BY_CODE: dict[str, AttributeDesc] = {desc.code: desc for desc in base_attributes()}

# Codes that stand for the same property at different tiers; owning one
# of them counts as owning the whole group.
_ALIASED_GROUPS: tuple[frozenset[str], ...] = (
    frozenset({"swing1", "swing2", "swing3"}),
    frozenset({"move1", "move2", "move3"}),
    frozenset({"balance1", "balance2", "balance3"}),
    frozenset({"block1", "block2", "block3"}),
    frozenset({"cast1", "cast2", "cast3", "cast"}),
)

_GROUP_OF: dict[str, frozenset[str]] = {
    code: group for group in _ALIASED_GROUPS for code in group
}


def all_attributes() -> tuple[AttributeDesc, ...]:
    """Return every known attribute description, in table order."""
    return base_attributes()


def get_attribute_consume(code: str) -> AttributeConsume:
    """Decide how an attribute code met in the data should be treated.

    Empty codes and codes starting with '*' are skipped; codes from the
    table are known; anything else is kept as is.
    """
    if not code or code.startswith("*"):
        return AttributeConsume.SKIP
    if code in _BY_CODE:
        return AttributeConsume.KNOWN
    return AttributeConsume.KEEP


def get_attribute_desc(code: str) -> AttributeDesc:
    """Return the description of a known code; raises KeyError otherwise."""
    try:
        return _BY_CODE[code]
    except KeyError:
        raise KeyError(f"unknown attribute code: {code!r}") from None


def is_min_max_range(code: str) -> bool:
    """Whether a known attribute takes a plain min/max value range."""
    if get_attribute_consume(code) is not AttributeConsume.KNOWN:
        return False
    flags = get_attribute_desc(code).flags
    return not flags & {
        AttributeFlag.NO_MIN_MAX,
        AttributeFlag.PER_LEVEL,
        AttributeFlag.PD2_MAP,
    }


class UniqueAttributeChecker:
    """Set of attribute codes already used, with tiered codes grouped together."""

    def __init__(self, attrs: Iterable[str] = ()) -> None:
        self._data: set[str] = set()
        self.update(attrs)

    def add(self, attr: str) -> None:
        """Record ``attr`` and every code aliased with it."""
        self._data.add(attr)
        group = _GROUP_OF.get(attr)
        if group is not None:
            self._data.update(group)

    def update(self, attrs: Iterable[str]) -> None:
        """Record each code of ``attrs``."""
        for attr in attrs:
            self.add(attr)

    def __contains__(self, attr: object) -> bool:
        return attr in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._data))

    def __len__(self) -> int:
        return len(self._data)