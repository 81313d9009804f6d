"""VCFG Core — parser and query API for VCFG configuration files."""

from .document import Document
from .errors import VCFGError, VCFGSyntaxError
from .getter import Scope, ScopeKind
from .model import ARRAY_VALUE, OBJECT_VALUE, KeyNode, Section
from .options import ParserOptions
from .values import Invalid, Missing, _Invalid, _Missing
from .compat import LegacyParser
from .repl import VCFGRepl

__all__ = [
    "Document",
    "ParserOptions",
    "KeyNode",
    "Section",
    "ARRAY_VALUE",
    "OBJECT_VALUE",
    "Scope",
    "ScopeKind",
    "Missing",
    "Invalid",
    "VCFGError",
    "VCFGSyntaxError",
    "LegacyParser",
    "VCFGRepl",
]
