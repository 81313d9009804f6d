"""VCFGRepl — interactive inspection of parsed configuration files.

Also provides the ``vcfg-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import shlex
import sys
from typing import IO

from .document import Document
from .errors import VCFGError
from .model import KeyNode, Section
from .options import ParserOptions
from .values import Missing, _Missing

ROOT_MARKER = "-"


# ---------------------------------------------------------------------------
# VCFGRepl class (programmatic use)
# ---------------------------------------------------------------------------

class VCFGRepl:
    """Stateful session around one ``Document``.

    Usage::

        repl = VCFGRepl()
        repl.load("app.vcfg")
        repl.query(["server", "limits", "max_clients"])   # → KeyNode
        repl.query(["-", "name"])                        # root section
        repl.reset()
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        self.options = options
        self.doc = Document(options)
        self.path: str | None = None

    def load(self, path: str) -> bool:
        self.path = path
        return self.doc.open(path)

    def load_text(self, text: str) -> bool:
        self.path = None
        self.doc.set_buffer(text)
        return self.doc.parse()

    def query(self, path: list[str]) -> KeyNode | _Missing:
        """Resolve ``[section, key, child, …]``; ``-`` names the root section."""
        if len(path) < 2:
            return Missing
        section = None if path[0] == ROOT_MARKER else path[0]
        node = self.doc.get_node(section, path[1])
        for name in path[2:]:
            if node is Missing:
                break
            node = self.doc.get_node_from_node(node, name)
        return node

    def reset(self) -> None:
        self.doc.clear()
        self.path = None


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _section_label(section: Section) -> str:
    return "(root)" if section.is_root else f"[{section.name}]"


def _fmt_inline(node: KeyNode) -> str:
    """One-line rendering of a node's value."""
    if node.is_array:
        return "[" + ", ".join(_fmt_inline(c) for c in node.children) + "]"
    if node.is_object:
        return "{" + ", ".join(f"{c.name} = {_fmt_inline(c)}" for c in node.children) + "}"
    if node.value is None:
        return "(empty)"
    return f'"{node.value}"'


def _fmt_inspect(node: KeyNode | _Missing, indent: int = 0) -> str:
    """Indented tree rendering for inspect() / i()."""
    if node is Missing:
        return "Missing"
    pad = "  " * indent
    if not node.is_container:
        return f"{pad}{node.name} = {_fmt_inline(node)}"
    kind = "array" if node.is_array else "object"
    lines = [f"{pad}{node.name} ({kind}, {len(node.children)} entries)"]
    for child in node.children:
        lines.append(_fmt_inspect(child, indent + 1))
    return "\n".join(lines)


def _show_sections(repl: VCFGRepl, dest: IO[str]) -> None:
    if not repl.doc.sections:
        print("  (nothing loaded)", file=dest)
        return
    for section in repl.doc.sections:
        print(f"  {_section_label(section)}  {len(section.keys)} keys", file=dest)


def _show_keys(repl: VCFGRepl, name: str | None, dest: IO[str]) -> None:
    section = repl.doc.get_section(name)
    if section is Missing:
        print(f"  no section named {name!r}", file=dest)
        return
    if not section.keys:
        print("  (no keys)", file=dest)
        return
    width = max(len(k.name) for k in section.keys)
    for key in section.keys:
        print(f"  {key.name:<{width}} : {_fmt_inline(key)}", file=dest)


def _split(expr: str, dest: IO[str]) -> list[str] | None:
    try:
        return shlex.split(expr)
    except ValueError as exc:
        print(f"Bad query: {exc}", file=dest)
        return None


def _query_expr(repl: VCFGRepl, expr: str, dest: IO[str]) -> None:
    path = _split(expr, dest)
    if path is None:
        return
    node = repl.query(path)
    if node is Missing:
        print("Missing", file=dest)
    else:
        print(_fmt_inline(node), file=dest)


def _inspect_expr(repl: VCFGRepl, expr: str, dest: IO[str]) -> None:
    path = _split(expr, dest)
    if path is not None:
        print(_fmt_inspect(repl.query(path)), file=dest)


def _run_file(repl: VCFGRepl, filepath: str, dest: IO[str]) -> None:
    try:
        with open(filepath, encoding="utf-8") as fh:
            for file_line in fh:
                if not _process_line(repl, file_line.rstrip("\n"), dest):
                    break
    except OSError as exc:
        print(f"Error reading '{filepath}': {exc}", file=sys.stderr)


def _process_line(repl: VCFGRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":sections":
        _show_sections(repl, dest)
        return True

    if line == ":keys" or line.startswith(":keys "):
        arg = line[len(":keys"):].strip()
        name = None if arg in ("", ROOT_MARKER) else arg
        _show_keys(repl, name, dest)
        return True

    if line.startswith(":load "):
        path = line[len(":load "):].strip()
        try:
            if not repl.load(path):
                print(f"Failed to load '{path}'", file=dest)
        except VCFGError as exc:
            print(f"Error in '{path}': {exc}", file=dest)
        return True

    if line == ":reset":
        repl.reset()
        return True

    # ── inspect() / i() ───────────────────────────────────────────────────
    for prefix in ("inspect(", "i("):
        if line.startswith(prefix) and line.endswith(")"):
            _inspect_expr(repl, line[len(prefix):-1].strip(), dest)
            return True

    # ── ? query ───────────────────────────────────────────────────────────
    if line.startswith("? "):
        _query_expr(repl, line[2:].strip(), dest)
        return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        _run_file(repl, line[4:].strip(), dest)
        return True

    print(f"Unknown command: {line}", file=dest)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vcfg-repl",
        description="Inspect VCFG configuration files interactively.",
    )
    parser.add_argument("path", nargs="?", help="configuration file to load")
    parser.add_argument("--strict", action="store_true", help="report malformed input as errors")
    parser.add_argument("--log-level", default="WARNING", help="logging level (default: WARNING)")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Interactive VCFG shell (``vcfg-repl`` / ``python -m vcfg_core.repl``)."""
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s %(message)s",
    )

    repl = VCFGRepl(ParserOptions(strict=args.strict))
    if args.path:
        try:
            if not repl.load(args.path):
                print(f"Failed to load '{args.path}'", file=sys.stderr)
        except VCFGError as exc:
            print(f"Error in '{args.path}': {exc}", file=sys.stderr)

    print("VCFG REPL  (:q to quit  |  :sections  :keys [section]  :load <path>  :reset  |  ? <section> <key> ...  inspect(...))")

    while True:
        try:
            line = input("VCFG> ").strip()
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not _process_line(repl, line, sys.stdout):
            break


if __name__ == "__main__":
    main()
