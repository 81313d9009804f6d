"""Method-style façade with the legacy return conventions.

Every getter takes ``(key)``, ``(section_name, key)`` or ``(parent_node, key)``
and reports failure the old way: ``None`` for strings and nodes, ``-1`` for
numbers (indistinguishable from a stored ``-1``), ``False`` for booleans.
Use ``Document`` directly to tell a missing key from a malformed one.
"""

from __future__ import annotations

import os

from . import getter
from .document import BufferLike, Document
from .getter import Scope
from .model import KeyNode, Section
from .options import ParserOptions
from .strconv import strtofloat, strtoint
from .values import Missing


def _scope(args: tuple) -> tuple[Scope, str]:
    if len(args) == 1:
        return Scope.root(), args[0]
    if len(args) != 2:
        raise TypeError(f"expected (key), (section, key) or (node, key), got {len(args)} arguments")
    where, key = args
    if isinstance(where, KeyNode):
        return Scope.node(where), key
    return Scope.section(where), key


class LegacyParser:
    """Thin wrapper over ``Document``; ``open``/``parse`` return 1 or 0."""

    def __init__(self, options: ParserOptions | None = None) -> None:
        self.document = Document(options)

    def open(self, path: str | os.PathLike[str]) -> int:
        return int(self.document.open(path))

    def clear(self) -> None:
        self.document.clear()

    def set_buffer(self, data: BufferLike) -> None:
        self.document.set_buffer(data)

    def parse(self) -> int:
        return int(self.document.parse())

    def get_section(self, name: str | None = None) -> Section | None:
        section = self.document.get_section(name)
        return None if section is Missing else section

    def get_node(self, *args) -> KeyNode | None:
        node = self.document.lookup(*_scope(args))
        return None if node is Missing else node

    def get_string(self, *args) -> str | None:
        text = getter.get_string(self.document.sections, *_scope(args))
        return None if text is Missing else text

    def get_int(self, *args) -> int:
        return strtoint(self.get_string(*args))

    def get_float(self, *args) -> float:
        return strtofloat(self.get_string(*args))

    def get_bool(self, *args) -> bool:
        return self.get_string(*args) == "true"

    def __enter__(self) -> "LegacyParser":
        return self

    def __exit__(self, *exc) -> None:
        self.clear()
