"""Keywords and record types of the trellis configuration text format.

The parser itself never builds these records: it hands their fields straight to
a :class:`~trellis_conf.core.action.ConfigAction`. The dataclasses are for sinks
that want to keep what they were given, such as
:class:`~trellis_conf.actions.collector.RecordCollector`.
"""

from dataclasses import dataclass
from enum import StrEnum

MAX_KEYWORD_LENGTH = 15


class Verb(StrEnum):
    """Top-level entry keywords."""

    DEVICE = ".device"
    COMMENT = ".comment"
    SYSCONFIG = ".sysconfig"
    TILE = ".tile"
    TILE_GROUP = ".tile_group"
    BRAM_INIT = ".bram_init"


class RecordKind(StrEnum):
    """Tile configuration record keywords."""

    ARC = "arc:"
    WORD = "word:"
    ENUM = "enum:"
    UNKNOWN = "unknown:"


@dataclass(frozen=True)
class Device:
    name: str


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class Sysconfig:
    name: str
    value: str


@dataclass(frozen=True)
class Tile:
    name: str


@dataclass(frozen=True)
class Arc:
    sink: str
    source: str


@dataclass(frozen=True)
class Word:
    name: str
    value: str


@dataclass(frozen=True)
class Enum:
    name: str
    value: str


@dataclass(frozen=True)
class Unknown:
    value: str


@dataclass(frozen=True)
class BramInit:
    index: int


@dataclass(frozen=True)
class BramData:
    index: int
    row: int
    value: int


@dataclass(frozen=True)
class Commit:
    pass


Record = (
    Device
    | Comment
    | Sysconfig
    | Tile
    | Arc
    | Word
    | Enum
    | Unknown
    | BramInit
    | BramData
    | Commit
)


def record_kind(record: Record) -> str:
    """Return the lower case kind name of a record, e.g. ``"bram_data"``."""
    names = {
        Device: "device",
        Comment: "comment",
        Sysconfig: "sysconfig",
        Tile: "tile",
        Arc: "arc",
        Word: "word",
        Enum: "enum",
        Unknown: "unknown",
        BramInit: "bram_init",
        BramData: "bram_data",
        Commit: "commit",
    }
    return names[type(record)]
