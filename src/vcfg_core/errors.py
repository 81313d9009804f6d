"""Exception types for VCFG Core."""

from __future__ import annotations


class VCFGError(Exception):
    """Base class for all VCFG Core errors."""


class VCFGSyntaxError(VCFGError):
    """Malformed input reported by the parser in strict mode."""

    def __init__(self, message: str, offset: int, line: int, column: int) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column
