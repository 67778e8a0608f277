"""Reader for trellis configuration text.

The format is line oriented with three levels of nesting::

    .device     LFE5U-25F
    .comment    Part: LFE5U-25F-6CABGA381
    .sysconfig  COMPRESS_CONFIG ON
    .tile       R2C2:PLC2
    arc: A0 H02E0701
    word: SLICEA.K0.INIT 1010101010101010
    enum: SLICEA.MODE LOGIC
    unknown: F54B8
    .tile_group R1C1:TAP_DRIVE R2C1:TAP_DRIVE
    enum: TAP.MODE ON
    .bram_init  3
    0a 1f 000
    1ff

Top-level entries start with a verb. A tile configuration block or a BRAM data
block ends where the next entry starts (a ``.`` after blanks) or at end of
input. ``#`` comments are allowed between entries only.

Records are passed to the :class:`~trellis_conf.core.action.ConfigAction` of the
:class:`~trellis_conf.core.context.ParseContext` as soon as they are read. The
first malformed or rejected record ends the parse.
"""

import re
from collections.abc import Callable
from enum import StrEnum
from pathlib import Path

from loguru import logger

from trellis_conf.core.context import ParseContext, ParseResult
from trellis_conf.core.cursor import Cursor, LineStream
from trellis_conf.core.records import MAX_KEYWORD_LENGTH, RecordKind, Verb
from trellis_conf.utils.exceptions import (
    ActionRejectedError,
    ConfigSyntaxError,
    TrellisConfError,
)

UINT_RE = re.compile(r"[0-9]+")
HEX_RE = re.compile(r"(?:0[xX])?[0-9a-fA-F]+")


class ConfigParser:
    """Recursive descent reader over one stream.

    Parameters
    ----------
    context : ParseContext
        Holds the action to drive and receives the diagnostic on failure.
    stream : LineStream
        Text stream positioned at the first entry. Owned by the caller.
    """

    def __init__(self, context: ParseContext, stream: LineStream) -> None:
        self.context = context
        self.action = context.action
        self.cursor = Cursor(stream)
        self.entries = 0
        self._verbs: dict[Verb, Callable[[], None]] = {
            Verb.DEVICE: self._read_device,
            Verb.COMMENT: self._read_comment,
            Verb.SYSCONFIG: self._read_sysconfig,
            Verb.TILE: self._read_tile,
            Verb.TILE_GROUP: self._read_tile_group,
            Verb.BRAM_INIT: self._read_bram,
        }
        self._records: dict[RecordKind, Callable[[], None]] = {
            RecordKind.ARC: self._read_arc,
            RecordKind.WORD: self._read_word,
            RecordKind.ENUM: self._read_enum,
            RecordKind.UNKNOWN: self._read_unknown,
        }

    def parse(self) -> ParseResult:
        """Read entries until end of input or the first failure.

        Returns
        -------
        ParseResult
            Success, or the diagnostic of the syntax error, rejected record or
            stream error that stopped the parse. The diagnostic is also left in
            the context.
        """
        self.context.clear()
        logger.debug("Reading trellis configuration")
        try:
            while self.cursor.at_entry():
                verb = self._keyword(Verb, "unknown verb '{}'")
                self._verbs[verb]()
                self.entries += 1
        except TrellisConfError as e:
            self.context.report(e.message, e.line if e.line is not None else self.cursor.lineno)
            return self.context.result(False)
        except OSError as e:
            self.context.report(e.strerror or str(e), self.cursor.lineno)
            return self.context.result(False)
        except UnicodeDecodeError as e:
            self.context.report(str(e), self.cursor.lineno + 1)
            return self.context.result(False)

        logger.debug(f"Read {self.entries} trellis configuration entries")
        return self.context.result(True)

    def _fail(self, message: str) -> ConfigSyntaxError:
        return ConfigSyntaxError(message, self.cursor.lineno)

    def _keyword(self, kind: type[StrEnum], unknown: str) -> StrEnum:
        word = self.cursor.read_keyword() or ""
        word = word[:MAX_KEYWORD_LENGTH]
        try:
            return kind(word)
        except ValueError:
            raise self._fail(unknown.format(word)) from None

    def _emit(self, callback: Callable[..., bool], *args: object) -> None:
        """Call an action callback, turn a refusal into ActionRejectedError."""
        if not callback(self.context.cookie, *args):
            shown = ", ".join(repr(a) for a in args)
            raise ActionRejectedError(
                f"{callback.__name__}({shown}) failed", self.cursor.lineno
            )

    def _words(self, count: int, message: str) -> list[str]:
        words = []
        for _ in range(count):
            word = self.cursor.read_word()
            if word is None:
                raise self._fail(message)
            words.append(word)
        return words

    # Entry level

    def _read_device(self) -> None:
        (name,) = self._words(1, "device name required")
        self._emit(self.action.on_device, name)

    def _read_comment(self) -> None:
        text = self.cursor.read_rest_of_line()
        if not text:
            raise self._fail("empty comment")
        self._emit(self.action.on_comment, text)

    def _read_sysconfig(self) -> None:
        name, value = self._words(2, "sysconfig requires name and value")
        self._emit(self.action.on_sysconfig, name, value)

    def _read_tile(self) -> None:
        (name,) = self._words(1, "tile name required")
        self._emit(self.action.on_tile, name)
        self._read_tile_conf()

    def _read_tile_group(self) -> None:
        (name,) = self._words(1, "tile name required")
        self._emit(self.action.on_tile, name)
        while (name := self.cursor.read_word()) is not None:
            self._emit(self.action.on_tile, name)
        self._read_tile_conf()

    def _read_bram(self) -> None:
        token = self.cursor.read_word()
        if token is None or not UINT_RE.fullmatch(token):
            raise self._fail("bram index required")
        index = int(token)
        self._emit(self.action.on_bram, index)

        row = 0
        while not self.cursor.at_block_end():
            value = self.cursor.read_keyword()
            if value is None or not HEX_RE.fullmatch(value):
                raise self._fail("hex bram value required")
            self._emit(self.action.on_data, index, row, int(value, 16))
            row += 1

        self._emit(self.action.on_commit)
        logger.debug(f"Committed BRAM {index} with {row} values")

    # Tile configuration level

    def _read_tile_conf(self) -> None:
        while not self.cursor.at_block_end():
            kind = self._keyword(RecordKind, "unknown tile record type '{}'")
            self._records[kind]()
        self._emit(self.action.on_commit)

    def _read_arc(self) -> None:
        sink, source = self._words(2, "arc requires sink and source")
        self._emit(self.action.on_arc, sink, source)

    def _read_word(self) -> None:
        name, value = self._words(2, "word requires name and value")
        self._emit(self.action.on_word, name, value)

    def _read_enum(self) -> None:
        name, value = self._words(2, "enum requires name and value")
        self._emit(self.action.on_enum, name, value)

    def _read_unknown(self) -> None:
        (value,) = self._words(1, "unknown requires value")
        self._emit(self.action.on_unknown, value)


def parse(context: ParseContext, stream: LineStream) -> ParseResult:
    """Parse a trellis configuration stream, driving the context's action.

    Parameters
    ----------
    context : ParseContext
        Action, cookie and diagnostic holder.
    stream : LineStream
        Open text stream. It is neither opened nor closed here.

    Returns
    -------
    ParseResult
        Truthy if the stream was fully consumed with every record accepted.
    """
    return ConfigParser(context, stream).parse()


def parse_file(context: ParseContext, path: Path | str) -> ParseResult:
    """Open ``path`` as UTF-8 text and parse it, see :func:`parse`.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    """
    with open(path, encoding="utf-8") as f:
        return parse(context, f)
