"""Core parsing pipeline.

- Cursor: lookahead and token reading over a text stream
- ConfigAction: the sink interface records are delivered to
- ParseContext: action, cookie and last diagnostic of a parse
- ConfigParser: the entry/record/BRAM grammar driving the action

Example
-------
::

    from trellis_conf.core import ParseContext, parse_file
    from trellis_conf.actions import RecordCollector

    collector = RecordCollector()
    result = parse_file(ParseContext(collector), "design.config")
    if not result:
        print(result.describe())
"""

from trellis_conf.core.action import ConfigAction
from trellis_conf.core.context import ParseContext, ParseResult
from trellis_conf.core.cursor import Cursor
from trellis_conf.core.parser import ConfigParser, parse, parse_file

__all__ = [
    "ConfigAction",
    "ConfigParser",
    "Cursor",
    "ParseContext",
    "ParseResult",
    "parse",
    "parse_file",
]
