"""Tree model for parsed VCFG data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


ARRAY_VALUE = "[array]"
OBJECT_VALUE = "{object}"


# ---------------------------------------------------------------------------
# KeyNode
# ---------------------------------------------------------------------------

@dataclass
class KeyNode:
    """A named tree unit.

    Scalars carry their raw text in ``value`` and have no children.
    Containers carry ``ARRAY_VALUE`` / ``OBJECT_VALUE`` and own their
    children; array children are named ``"0"``, ``"1"``, … in order.
    """

    name: str
    value: str | None = None
    children: list["KeyNode"] = field(default_factory=list)

    @property
    def is_array(self) -> bool:
        return self.value == ARRAY_VALUE

    @property
    def is_object(self) -> bool:
        return self.value == OBJECT_VALUE

    @property
    def is_container(self) -> bool:
        return self.is_array or self.is_object

    def child(self, name: str) -> "KeyNode | None":
        """First child named *name*, or ``None``."""
        for node in self.children:
            if node.name == name:
                return node
        return None

    def __iter__(self) -> Iterator["KeyNode"]:
        return iter(self.children)

    def to_python(self):
        """Plain-data view: arrays → list, objects → dict, scalars → str/None."""
        if self.is_array:
            return [c.to_python() for c in self.children]
        if self.is_object:
            out: dict = {}
            for c in self.children:
                out.setdefault(c.name, c.to_python())
            return out
        return self.value


# ---------------------------------------------------------------------------
# Section
# ---------------------------------------------------------------------------

@dataclass
class Section:
    """Top-level grouping of keys. ``name is None`` marks the root section."""

    name: str | None = None
    keys: list[KeyNode] = field(default_factory=list)

    @property
    def is_root(self) -> bool:
        return self.name is None

    def key(self, name: str) -> KeyNode | None:
        for node in self.keys:
            if node.name == name:
                return node
        return None

    def __iter__(self) -> Iterator[KeyNode]:
        return iter(self.keys)

    def to_python(self) -> dict:
        out: dict = {}
        for node in self.keys:
            out.setdefault(node.name, node.to_python())
        return out
