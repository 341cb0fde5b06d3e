"""Shared enums and small helpers used across the generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Mapping, TypeVar

_V = TypeVar("_V")

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class StorageType(Enum):
    """Where game data is read from or written to."""

    D2_RESURRECTED_INTERNAL = auto()  # CASC storage of a D2R installation
    D2_LEGACY_INTERNAL = auto()  # MPQ storage of a legacy installation
    D2_RESURRECTED_MOD_FOLDER = auto()  # folder with a D2R mod layout
    D2_LEGACY_FOLDER = auto()  # folder containing an extracted 'data' folder
    CSV_FOLDER = auto()  # folder with plain txt tables; input only


class ConflictPolicy(Enum):
    """How incoming data is combined with data that already exists."""

    REPLACE = auto()  # clear previous data
    APPEND = auto()  # place new data at the end
    UPDATE = auto()  # overwrite records with the same key
    APPEND_NEW = auto()  # add records that do not exist yet
    MERGE = auto()  # update, then append new
    SKIP = auto()  # keep the previous version
    RAISE_ERROR = auto()


@dataclass
class GenerationEnvironment:
    """Settings shared by every module during one generation run."""

    mod_name: str = ""
    d2r_path: str = ""
    out_path: str = ""
    export_all_tables: bool = False
    is_legacy: bool = False
    seed: int = 0

    def __post_init__(self) -> None:
        # The seed is an unsigned 32-bit value.
        self.seed = int(self.seed) & 0xFFFFFFFF


def to_lower(s: str) -> str:
    """Lower-case ASCII letters only, leaving every other character as is."""
    return s.translate(_ASCII_LOWER)


def map_value(mapping: Mapping[str, _V], key: str, default: _V | None = None) -> _V | None:
    """Return ``mapping[key]``, or ``default`` when the key is absent."""
    return mapping.get(key, default)