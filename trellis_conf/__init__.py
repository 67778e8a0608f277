"""trellis-conf package.

Streaming reader for the textual FPGA configuration dumps written by the trellis
tools: device declarations, tile configuration records and block RAM
initialisation data.

Processing Pipeline
-------------------
1. **Cursor**: lookahead and token reading over a text stream
2. **ConfigParser**: entry, tile record and BRAM grammar
3. **ConfigAction**: caller-supplied sink receiving every record in order

Quick Start
-----------
::

    from trellis_conf import ParseContext, RecordCollector, parse_file

    collector = RecordCollector()
    result = parse_file(ParseContext(collector), "design.config")
    if not result:
        raise SystemExit(result.describe())
    for record in collector.records:
        print(record)
"""

from trellis_conf.actions import (
    AcceptAllAction,
    ConfigWriter,
    LoggingAction,
    RecordCollector,
)
from trellis_conf.core import (
    ConfigAction,
    ConfigParser,
    ParseContext,
    ParseResult,
    parse,
    parse_file,
)

__all__ = [
    # Core pipeline
    "ConfigAction",
    "ConfigParser",
    "ParseContext",
    "ParseResult",
    "parse",
    "parse_file",
    # Actions
    "AcceptAllAction",
    "ConfigWriter",
    "LoggingAction",
    "RecordCollector",
]
