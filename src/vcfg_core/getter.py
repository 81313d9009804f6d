"""Lookup and typed coercion over a parsed section list."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence

from .model import KeyNode, Section
from .strconv import parse_float, parse_int
from .values import Missing, _Invalid, _Missing


# ---------------------------------------------------------------------------
# Scope
# ---------------------------------------------------------------------------

class ScopeKind(Enum):
    ROOT = auto()
    SECTION = auto()
    NODE = auto()


@dataclass(frozen=True)
class Scope:
    """Where a key is looked up: the root section, a named section, or a node."""

    kind: ScopeKind
    section_name: str | None = None
    parent: KeyNode | None = None

    @classmethod
    def root(cls) -> "Scope":
        return cls(ScopeKind.ROOT)

    @classmethod
    def section(cls, name: str | None) -> "Scope":
        if not name:
            return cls.root()
        return cls(ScopeKind.SECTION, section_name=name)

    @classmethod
    def node(cls, parent: KeyNode | None) -> "Scope":
        # No parent means the root section.
        if parent is None:
            return cls.root()
        return cls(ScopeKind.NODE, parent=parent)


# ---------------------------------------------------------------------------
# Node lookup
# ---------------------------------------------------------------------------

def find_section(sections: Sequence[Section], name: str | None) -> Section | _Missing:
    """First section called *name*; ``None`` or ``""`` selects the root."""
    wanted = name or None
    for section in sections:
        if section.name == wanted:
            return section
    return Missing


def lookup(sections: Sequence[Section], scope: Scope, key: str) -> KeyNode | _Missing:
    """Resolve *key* inside *scope*."""
    if scope.kind is ScopeKind.NODE:
        found = scope.parent.child(key)
    else:
        section = find_section(sections, scope.section_name)
        if section is Missing:
            return Missing
        found = section.key(key)
    return Missing if found is None else found


def get_node(sections: Sequence[Section], section_name: str | None, key: str) -> KeyNode | _Missing:
    return lookup(sections, Scope.section(section_name), key)


def get_node_from_node(sections: Sequence[Section], parent: KeyNode | None, key: str) -> KeyNode | _Missing:
    return lookup(sections, Scope.node(parent), key)


# ---------------------------------------------------------------------------
# Typed getters
# ---------------------------------------------------------------------------

def get_string(sections: Sequence[Section], scope: Scope, key: str) -> str | _Missing:
    """Raw value text. Containers yield their ``[array]`` / ``{object}`` marker.

    A key whose value was empty (``k =`` or ``k = ""``) counts as Missing.
    """
    node = lookup(sections, scope, key)
    if node is Missing or node.value is None:
        return Missing
    return node.value


def get_int(sections: Sequence[Section], scope: Scope, key: str) -> int | _Missing | _Invalid:
    text = get_string(sections, scope, key)
    if text is Missing:
        return Missing
    return parse_int(text)


def get_float(sections: Sequence[Section], scope: Scope, key: str) -> float | _Missing | _Invalid:
    text = get_string(sections, scope, key)
    if text is Missing:
        return Missing
    return parse_float(text)


def get_bool(sections: Sequence[Section], scope: Scope, key: str) -> bool:
    """True only for the exact text ``true``."""
    return get_string(sections, scope, key) == "true"
