"""In-memory builder collecting every record it is given."""

from typing import Any

from trellis_conf.core.action import ConfigAction
from trellis_conf.core.records import (
    Arc,
    BramData,
    BramInit,
    Comment,
    Commit,
    Device,
    Enum,
    Record,
    Sysconfig,
    Tile,
    Unknown,
    Word,
    record_kind,
)


class RecordCollector(ConfigAction):
    """Collect records, in the order they are delivered, into :attr:`records`.

    Attributes
    ----------
    records : list[Record]
        Everything accepted so far. Records of a parse that later failed stay
        here; callers decide whether to keep or drop them.
    """

    def __init__(self) -> None:
        self.records: list[Record] = []

    def _add(self, record: Record) -> bool:
        self.records.append(record)
        return True

    def on_device(self, cookie: Any, name: str) -> bool:
        return self._add(Device(name))

    def on_comment(self, cookie: Any, text: str) -> bool:
        return self._add(Comment(text))

    def on_sysconfig(self, cookie: Any, name: str, value: str) -> bool:
        return self._add(Sysconfig(name, value))

    def on_tile(self, cookie: Any, name: str) -> bool:
        return self._add(Tile(name))

    def on_arc(self, cookie: Any, sink: str, source: str) -> bool:
        return self._add(Arc(sink, source))

    def on_word(self, cookie: Any, name: str, value: str) -> bool:
        return self._add(Word(name, value))

    def on_enum(self, cookie: Any, name: str, value: str) -> bool:
        return self._add(Enum(name, value))

    def on_unknown(self, cookie: Any, value: str) -> bool:
        return self._add(Unknown(value))

    def on_bram(self, cookie: Any, index: int) -> bool:
        return self._add(BramInit(index))

    def on_data(self, cookie: Any, index: int, row: int, value: int) -> bool:
        return self._add(BramData(index, row, value))

    def on_commit(self, cookie: Any) -> bool:
        return self._add(Commit())

    def as_dicts(self) -> list[dict[str, Any]]:
        """Return the records as plain dictionaries tagged with their kind."""
        return [{"kind": record_kind(r), **vars(r)} for r in self.records]
