"""Reader layer: recursive-descent parsing of VCFG text into KeyNode trees.

Every ``parse_*`` function takes a ``Cursor``, advances it, and returns the
number of bytes it consumed. A return of 0 means "nothing recognised here"
and lets the caller try the next alternative.
"""

from __future__ import annotations

import logging

from .errors import VCFGSyntaxError
from .model import ARRAY_VALUE, OBJECT_VALUE, KeyNode, Section
from .options import DEFAULT_OPTIONS, ParserOptions
from .scanner import (
    WHITESPACE,
    Cursor,
    skip_comments,
    skip_whitespace,
)

logger = logging.getLogger(__name__)

_QUOTE = ord('"')
_EQUALS = ord("=")
_COMMA = ord(",")
_ARRAY_OPEN = ord("[")
_ARRAY_CLOSE = ord("]")
_OBJECT_OPEN = ord("{")
_OBJECT_CLOSE = ord("}")

# Bare values end at whitespace, ',' or ';'. Inside a container the
# container's closing bracket ends them too.
_VALUE_STOP = WHITESPACE | frozenset(b",;")
_KEY_STOP = WHITESPACE | frozenset(b"=")


def _fail(cursor: Cursor, message: str, offset: int | None = None) -> VCFGSyntaxError:
    if offset is None:
        offset = cursor.pos
    line, column = cursor.location(offset)
    return VCFGSyntaxError(message, offset, line, column)


# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------

def read_token(cursor: Cursor, stop: frozenset[int]) -> bytes:
    """Read a quoted or bare token and return its raw bytes.

    ``"…"`` runs to the next quote (consumed, not returned) or the end of the
    buffer; there are no escapes. A bare token runs until a byte in *stop*.
    """
    data = cursor.data
    if cursor.peek() == _QUOTE:
        start = cursor.pos + 1
        close = data.find(b'"', start, cursor.end)
        if close < 0:
            cursor.pos = cursor.end
            return data[start:cursor.end]
        cursor.pos = close + 1
        return data[start:close]

    start = cursor.pos
    i = start
    while i < cursor.end and data[i] not in stop:
        i += 1
    cursor.pos = i
    return data[start:i]


def parse_value(
    cursor: Cursor,
    node: KeyNode,
    *,
    options: ParserOptions = DEFAULT_OPTIONS,
    closer: int | None = None,
) -> int:
    """Parse a scalar into ``node.value``; an empty capture leaves it ``None``."""
    start = cursor.pos
    stop = _VALUE_STOP if closer is None else _VALUE_STOP | {closer}
    raw = read_token(cursor, stop)
    if raw:
        node.value = options.decode(raw)
    return cursor.pos - start


def _parse_any(
    cursor: Cursor,
    node: KeyNode,
    options: ParserOptions,
    depth: int,
    closer: int | None,
) -> int:
    """Dispatch on the next byte: object, array or scalar."""
    byte = cursor.peek()
    if byte == _OBJECT_OPEN:
        return parse_object(cursor, node, options=options, depth=depth + 1)
    if byte == _ARRAY_OPEN:
        return parse_array(cursor, node, options=options, depth=depth + 1)
    return parse_value(cursor, node, options=options, closer=closer)


def _too_deep(cursor: Cursor, options: ParserOptions, depth: int) -> bool:
    if depth <= options.max_depth:
        return False
    if options.strict:
        raise _fail(cursor, f"nesting deeper than {options.max_depth} levels")
    logger.debug("nesting limit reached at offset %d, skipping container", cursor.pos)
    _skip_container(cursor)
    return True


def _skip_container(cursor: Cursor) -> None:
    """Skip past the close matching an already-consumed opening bracket.

    Nested brackets are counted; quoted strings and comments are stepped over
    whole. An unbalanced container runs to the end of the buffer.
    """
    level = 1
    while not cursor.at_end:
        if skip_comments(cursor):
            continue
        byte = cursor.peek()
        if byte == _QUOTE:
            read_token(cursor, _VALUE_STOP)
            continue
        cursor.advance()
        if byte in (_ARRAY_OPEN, _OBJECT_OPEN):
            level += 1
        elif byte in (_ARRAY_CLOSE, _OBJECT_CLOSE):
            level -= 1
            if level == 0:
                return


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------

def parse_array(
    cursor: Cursor,
    node: KeyNode,
    *,
    options: ParserOptions = DEFAULT_OPTIONS,
    depth: int = 1,
) -> int:
    """Parse ``[ v0, v1, … ]`` into children named ``"0"``, ``"1"``, ….

    A missing comma ends the array: everything up to the next ``]`` is
    discarded.
    """
    if cursor.peek() != _ARRAY_OPEN:
        return 0
    start = cursor.pos
    cursor.advance()
    node.value = ARRAY_VALUE
    if _too_deep(cursor, options, depth):
        return cursor.pos - start

    index = 0
    while not cursor.at_end and cursor.peek() != _ARRAY_CLOSE:
        if skip_whitespace(cursor):
            continue
        if skip_comments(cursor):
            continue

        element_start = cursor.pos
        element = KeyNode(name=str(index))
        if not _parse_any(cursor, element, options, depth, _ARRAY_CLOSE):
            # Nothing usable at this position (e.g. a stray ',').
            if options.strict:
                raise _fail(cursor, "expected an array element")
            logger.debug("empty array element at offset %d, truncating array", element_start)
            cursor.skip_to(_ARRAY_CLOSE)
            break
        node.children.append(element)

        skip_whitespace(cursor)
        if cursor.peek() == _COMMA:
            cursor.advance()
            index += 1
            continue
        if cursor.peek() != _ARRAY_CLOSE and not cursor.at_end:
            if options.strict:
                raise _fail(cursor, "expected ',' or ']' after array element")
            logger.debug("missing ',' in array at offset %d, truncating array", cursor.pos)
        cursor.skip_to(_ARRAY_CLOSE)

    if cursor.peek() == _ARRAY_CLOSE:
        cursor.advance()
    return cursor.pos - start


# ---------------------------------------------------------------------------
# Key-value pairs and objects
# ---------------------------------------------------------------------------

def parse_pair(
    cursor: Cursor,
    *,
    options: ParserOptions = DEFAULT_OPTIONS,
    depth: int = 0,
    closer: int | None = None,
) -> tuple[int, KeyNode | None]:
    """Parse ``key = value``.

    Returns ``(consumed, node)``. ``node`` is ``None`` when the key is empty
    or no ``=`` follows it; the bytes read so far are still consumed.
    """
    start = cursor.pos
    name = read_token(cursor, _KEY_STOP)
    skip_whitespace(cursor)

    if not name:
        if options.strict and cursor.pos > start:
            raise _fail(cursor, "empty key name", start)
        if cursor.pos > start:
            logger.debug("dropping pair with empty key at offset %d", start)
        return cursor.pos - start, None
    if cursor.peek() != _EQUALS:
        if options.strict:
            raise _fail(cursor, f"expected '=' after key {options.decode(name)!r}")
        logger.debug("dropping key without '=' at offset %d", start)
        return cursor.pos - start, None

    cursor.advance()
    skip_whitespace(cursor)
    node = KeyNode(name=options.decode(name))
    _parse_any(cursor, node, options, depth, closer)
    return cursor.pos - start, node


def parse_object(
    cursor: Cursor,
    node: KeyNode,
    *,
    options: ParserOptions = DEFAULT_OPTIONS,
    depth: int = 1,
) -> int:
    """Parse ``{ k = v, … }`` into named children.

    A missing comma ends the object: everything up to the next ``}`` is
    discarded.
    """
    if cursor.peek() != _OBJECT_OPEN:
        return 0
    start = cursor.pos
    cursor.advance()
    node.value = OBJECT_VALUE
    if _too_deep(cursor, options, depth):
        return cursor.pos - start

    while not cursor.at_end and cursor.peek() != _OBJECT_CLOSE:
        if skip_whitespace(cursor):
            continue
        if skip_comments(cursor):
            continue

        pair_start = cursor.pos
        consumed, child = parse_pair(cursor, options=options, depth=depth, closer=_OBJECT_CLOSE)
        if not consumed:
            if options.strict:
                raise _fail(cursor, "expected 'key = value'")
            logger.debug("unrecognised input in object at offset %d, truncating object", pair_start)
            cursor.skip_to(_OBJECT_CLOSE)
            break
        if child is not None:
            node.children.append(child)

        skip_whitespace(cursor)
        if cursor.peek() == _COMMA:
            cursor.advance()
            continue
        if cursor.peek() != _OBJECT_CLOSE and not cursor.at_end:
            if options.strict:
                raise _fail(cursor, "expected ',' or '}' after object member")
            logger.debug("missing ',' in object at offset %d, truncating object", cursor.pos)
        cursor.skip_to(_OBJECT_CLOSE)

    if cursor.peek() == _OBJECT_CLOSE:
        cursor.advance()
    return cursor.pos - start


# ---------------------------------------------------------------------------
# Sections and the top level
# ---------------------------------------------------------------------------

def parse_section_header(
    cursor: Cursor,
    sections: list[Section],
    *,
    options: ParserOptions = DEFAULT_OPTIONS,
) -> int:
    """Parse ``[Name]`` and append a new section. ``[]`` creates nothing."""
    if cursor.peek() != _ARRAY_OPEN:
        return 0
    start = cursor.pos
    cursor.advance()
    name_start = cursor.pos
    cursor.skip_to(_ARRAY_CLOSE)
    name = cursor.data[name_start:cursor.pos]
    cursor.advance()

    if name:
        sections.append(Section(name=options.decode(name)))
    elif options.strict:
        raise _fail(cursor, "empty section name", start)
    return cursor.pos - start


def read_sections(
    cursor: Cursor,
    *,
    options: ParserOptions = DEFAULT_OPTIONS,
) -> list[Section]:
    """Parse the whole buffer into sections; the root section comes first.

    Stops at the first input nothing recognises; the rest of the buffer is
    left unread (``cursor.pos`` tells how far it got).
    """
    sections: list[Section] = [Section()]

    while not cursor.at_end:
        if skip_whitespace(cursor):
            continue
        if skip_comments(cursor):
            continue
        if parse_section_header(cursor, sections, options=options):
            continue

        consumed, node = parse_pair(cursor, options=options)
        if node is not None:
            sections[-1].keys.append(node)
        if consumed:
            continue
        break

    if not cursor.at_end and options.strict:
        raise _fail(cursor, "unexpected input")
    return sections
