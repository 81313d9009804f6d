"""Document — the parser context: owns the buffer and the parsed tree."""

from __future__ import annotations

import logging
import os

from . import getter
from .getter import Scope
from .model import KeyNode, Section
from .options import DEFAULT_OPTIONS, ParserOptions
from .reader import read_sections
from .scanner import Cursor
from .values import _Invalid, _Missing

logger = logging.getLogger(__name__)

BufferLike = bytes | bytearray | memoryview | str


class Document:
    """Holds one configuration buffer and the sections parsed from it.

    Usage::

        doc = Document()
        doc.open("app.vcfg")                 # read + parse, False on failure
        doc.get_string("server", "host")
        node = doc.get_node("server", "limits")
        doc.get_int_from_node(node, "max_clients")
        doc.clear()

    A document is not thread-safe; share it between threads only for reads
    once parsing has finished.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self.options = options or DEFAULT_OPTIONS
        self._buffer: bytes | None = None
        self.sections: list[Section] = []
        self.consumed = 0

    @classmethod
    def from_buffer(cls, data: BufferLike, options: ParserOptions | None = None) -> "Document":
        """Build a document from *data* and parse it immediately."""
        doc = cls(options)
        doc.set_buffer(data)
        doc.parse()
        return doc

    # -- Lifecycle ---------------------------------------------------------

    @property
    def buffer(self) -> bytes | None:
        return self._buffer

    @property
    def is_parsed(self) -> bool:
        return bool(self.sections)

    def set_buffer(self, data: BufferLike) -> None:
        """Replace the buffer; any previously parsed tree is dropped."""
        if isinstance(data, str):
            data = self.options.encode(data)
        self.clear()
        self._buffer = bytes(data)

    def open(self, path: str | os.PathLike[str]) -> bool:
        """Read *path* fully into the buffer and parse it.

        Returns False if the file cannot be read; the document is left empty.
        """
        self.clear()
        try:
            with open(path, "rb") as fh:
                data = fh.read()
        except OSError as exc:
            logger.error("cannot read configuration file %s: %s", path, exc)
            return False
        self._buffer = data
        return self.parse()

    def parse(self) -> bool:
        """Parse the buffer into sections. False if there is no data."""
        if not self._buffer:
            return False

        cursor = Cursor(self._buffer)
        self.sections = read_sections(cursor, options=self.options)
        self.consumed = cursor.pos

        if not cursor.at_end:
            line, column = cursor.location()
            logger.warning(
                "parsing stopped at line %d, column %d; %d trailing bytes ignored",
                line, column, cursor.end - cursor.pos,
            )
        logger.debug(
            "parsed %d bytes into %d sections, %d top-level keys",
            self.consumed, len(self.sections), sum(len(s.keys) for s in self.sections),
        )
        return True

    def clear(self) -> None:
        """Drop the buffer and the whole tree. Safe to call repeatedly."""
        self._buffer = None
        self.sections = []
        self.consumed = 0

    # -- Lookup ------------------------------------------------------------

    def get_section(self, name: str | None = None) -> Section | _Missing:
        return getter.find_section(self.sections, name)

    def lookup(self, scope: Scope, key: str) -> KeyNode | _Missing:
        return getter.lookup(self.sections, scope, key)

    def get_node(self, section_name: str | None, key: str) -> KeyNode | _Missing:
        return getter.get_node(self.sections, section_name, key)

    def get_node_from_node(self, parent: KeyNode | None, key: str) -> KeyNode | _Missing:
        return getter.get_node_from_node(self.sections, parent, key)

    # -- Typed values: by section name ----------------------------------------

    def get_string(self, section_name: str | None, key: str) -> str | _Missing:
        return getter.get_string(self.sections, Scope.section(section_name), key)

    def get_int(self, section_name: str | None, key: str) -> int | _Missing | _Invalid:
        return getter.get_int(self.sections, Scope.section(section_name), key)

    def get_float(self, section_name: str | None, key: str) -> float | _Missing | _Invalid:
        return getter.get_float(self.sections, Scope.section(section_name), key)

    def get_bool(self, section_name: str | None, key: str) -> bool:
        return getter.get_bool(self.sections, Scope.section(section_name), key)

    # -- Typed values: by parent node -----------------------------------------

    def get_string_from_node(self, parent: KeyNode | None, key: str) -> str | _Missing:
        return getter.get_string(self.sections, Scope.node(parent), key)

    def get_int_from_node(self, parent: KeyNode | None, key: str) -> int | _Missing | _Invalid:
        return getter.get_int(self.sections, Scope.node(parent), key)

    def get_float_from_node(self, parent: KeyNode | None, key: str) -> float | _Missing | _Invalid:
        return getter.get_float(self.sections, Scope.node(parent), key)

    def get_bool_from_node(self, parent: KeyNode | None, key: str) -> bool:
        return getter.get_bool(self.sections, Scope.node(parent), key)

    # -- Conversion --------------------------------------------------------

    def to_dict(self) -> dict:
        """Plain-data view of the tree; the root section is keyed by ``None``.

        Duplicate section or key names keep their first occurrence.
        """
        out: dict = {}
        for section in self.sections:
            out.setdefault(section.name, section.to_python())
        return out
