"""Write records back out as trellis configuration text."""

from typing import Any, TextIO

from trellis_conf.core.action import ConfigAction


class ConfigWriter(ConfigAction):
    """Re-emit records in canonical form.

    Tile names are held back until their block starts, so a single name comes
    out as ``.tile`` and several as one ``.tile_group``. Blocks are followed by
    an empty line.

    Parameters
    ----------
    out : TextIO
        Destination stream. Owned by the caller.
    values_per_line : int, optional
        Number of BRAM values written per line, by default 8.
    """

    def __init__(self, out: TextIO, values_per_line: int = 8) -> None:
        if values_per_line < 1:
            raise ValueError("values_per_line must be positive")
        self.out = out
        self.values_per_line = values_per_line
        self._tiles: list[str] = []
        self._row: list[str] = []

    def _line(self, text: str) -> bool:
        self.out.write(f"{text}\n")
        return True

    def _open_tiles(self) -> None:
        if len(self._tiles) == 1:
            self._line(f".tile {self._tiles[0]}")
        elif self._tiles:
            self._line(f".tile_group {' '.join(self._tiles)}")
        self._tiles = []

    def _flush_row(self) -> None:
        if self._row:
            self._line(" ".join(self._row))
            self._row = []

    def on_device(self, cookie: Any, name: str) -> bool:
        return self._line(f".device {name}")

    def on_comment(self, cookie: Any, text: str) -> bool:
        return self._line(f".comment {text}")

    def on_sysconfig(self, cookie: Any, name: str, value: str) -> bool:
        return self._line(f".sysconfig {name} {value}")

    def on_tile(self, cookie: Any, name: str) -> bool:
        self._tiles.append(name)
        return True

    def on_arc(self, cookie: Any, sink: str, source: str) -> bool:
        self._open_tiles()
        return self._line(f"arc: {sink} {source}")

    def on_word(self, cookie: Any, name: str, value: str) -> bool:
        self._open_tiles()
        return self._line(f"word: {name} {value}")

    def on_enum(self, cookie: Any, name: str, value: str) -> bool:
        self._open_tiles()
        return self._line(f"enum: {name} {value}")

    def on_unknown(self, cookie: Any, value: str) -> bool:
        self._open_tiles()
        return self._line(f"unknown: {value}")

    def on_bram(self, cookie: Any, index: int) -> bool:
        return self._line(f".bram_init {index}")

    def on_data(self, cookie: Any, index: int, row: int, value: int) -> bool:
        self._row.append(f"{value:03x}")
        if len(self._row) == self.values_per_line:
            self._flush_row()
        return True

    def on_commit(self, cookie: Any) -> bool:
        # an empty tile block still needs its header
        self._open_tiles()
        self._flush_row()
        return self._line("")
