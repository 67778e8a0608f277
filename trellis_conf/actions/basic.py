"""Actions that accept every record."""

from typing import Any

from loguru import logger

from trellis_conf.core.action import ConfigAction


class AcceptAllAction(ConfigAction):
    """Accepts every record and keeps nothing. Useful to check syntax only."""

    def on_device(self, cookie: Any, name: str) -> bool:
        return True

    def on_comment(self, cookie: Any, text: str) -> bool:
        return True

    def on_sysconfig(self, cookie: Any, name: str, value: str) -> bool:
        return True

    def on_tile(self, cookie: Any, name: str) -> bool:
        return True

    def on_arc(self, cookie: Any, sink: str, source: str) -> bool:
        return True

    def on_word(self, cookie: Any, name: str, value: str) -> bool:
        return True

    def on_enum(self, cookie: Any, name: str, value: str) -> bool:
        return True

    def on_unknown(self, cookie: Any, value: str) -> bool:
        return True

    def on_bram(self, cookie: Any, index: int) -> bool:
        return True

    def on_data(self, cookie: Any, index: int, row: int, value: int) -> bool:
        return True

    def on_commit(self, cookie: Any) -> bool:
        return True


class LoggingAction(AcceptAllAction):
    """Logs every record at info level and accepts it."""

    def on_device(self, cookie: Any, name: str) -> bool:
        logger.info(f"Device {name}")
        return True

    def on_comment(self, cookie: Any, text: str) -> bool:
        logger.info(f"Comment: {text}")
        return True

    def on_sysconfig(self, cookie: Any, name: str, value: str) -> bool:
        logger.info(f"Sysconfig {name} = {value}")
        return True

    def on_tile(self, cookie: Any, name: str) -> bool:
        logger.info(f"Tile {name}")
        return True

    def on_arc(self, cookie: Any, sink: str, source: str) -> bool:
        logger.info(f"  arc {sink} <- {source}")
        return True

    def on_word(self, cookie: Any, name: str, value: str) -> bool:
        logger.info(f"  word {name} = {value}")
        return True

    def on_enum(self, cookie: Any, name: str, value: str) -> bool:
        logger.info(f"  enum {name} = {value}")
        return True

    def on_unknown(self, cookie: Any, value: str) -> bool:
        logger.info(f"  unknown bit {value}")
        return True

    def on_bram(self, cookie: Any, index: int) -> bool:
        logger.info(f"BRAM {index}")
        return True

    def on_data(self, cookie: Any, index: int, row: int, value: int) -> bool:
        logger.info(f"  BRAM {index}[{row}] = {value:#x}")
        return True

    def on_commit(self, cookie: Any) -> bool:
        logger.info("Commit")
        return True
