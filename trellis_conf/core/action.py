"""Action interface driven by the configuration parser.

The parser hands every record it reads to one of these callbacks, in input
order, and never looks at what the callbacks do with them. A callback returns
``True`` to accept a record and ``False`` to stop the parse; it may instead raise
:class:`~trellis_conf.utils.exceptions.ActionRejectedError` to stop it with a
reason of its own.

Every callback receives the ``cookie`` given to the
:class:`~trellis_conf.core.context.ParseContext`, unchanged.
"""

from abc import ABC, abstractmethod
from typing import Any


class ConfigAction(ABC):
    """Abstract base for record sinks.

    Follows strategy pattern - the same parser feeds an in-memory builder, a
    text writer or a bitstream encoder without depending on any of them.
    """

    @abstractmethod
    def on_device(self, cookie: Any, name: str) -> bool:
        """Handle ``.device <name>``."""
        ...

    @abstractmethod
    def on_comment(self, cookie: Any, text: str) -> bool:
        """Handle ``.comment <text>``."""
        ...

    @abstractmethod
    def on_sysconfig(self, cookie: Any, name: str, value: str) -> bool:
        """Handle ``.sysconfig <name> <value>``."""
        ...

    @abstractmethod
    def on_tile(self, cookie: Any, name: str) -> bool:
        """Handle a tile named by ``.tile`` or ``.tile_group``.

        For ``.tile_group`` this is called once per name, before the records of
        the shared configuration block.
        """
        ...

    @abstractmethod
    def on_arc(self, cookie: Any, sink: str, source: str) -> bool:
        """Handle ``arc: <sink> <source>``."""
        ...

    @abstractmethod
    def on_word(self, cookie: Any, name: str, value: str) -> bool:
        """Handle ``word: <name> <value>``."""
        ...

    @abstractmethod
    def on_enum(self, cookie: Any, name: str, value: str) -> bool:
        """Handle ``enum: <name> <value>``."""
        ...

    @abstractmethod
    def on_unknown(self, cookie: Any, value: str) -> bool:
        """Handle ``unknown: <value>``."""
        ...

    @abstractmethod
    def on_bram(self, cookie: Any, index: int) -> bool:
        """Handle ``.bram_init <index>``."""
        ...

    @abstractmethod
    def on_data(self, cookie: Any, index: int, row: int, value: int) -> bool:
        """Handle one value of a ``.bram_init`` block.

        Parameters
        ----------
        cookie : Any
            Opaque value from the parse context.
        index : int
            Index of the block RAM being initialised.
        row : int
            Zero-based position of the value within the block.
        value : int
            The value, parsed from hexadecimal.
        """
        ...

    @abstractmethod
    def on_commit(self, cookie: Any) -> bool:
        """Finish the current tile or BRAM block, once all its records succeeded."""
        ...
