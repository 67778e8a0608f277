"""Ready made actions: syntax checking, logging, collecting and rewriting records."""

from trellis_conf.actions.basic import AcceptAllAction, LoggingAction
from trellis_conf.actions.collector import RecordCollector
from trellis_conf.actions.writer import ConfigWriter

__all__ = [
    "AcceptAllAction",
    "ConfigWriter",
    "LoggingAction",
    "RecordCollector",
]
