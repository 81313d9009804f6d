"""Parser options."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserOptions:
    """Knobs that change how a buffer is read.

    - ``strict``: raise ``VCFGSyntaxError`` on fragments the default grammar
      drops or truncates silently (missing separators, empty keys, missing
      ``=``, trailing input the parser cannot consume)
    - ``encoding`` / ``errors``: decoding of names and values from raw bytes
    - ``max_depth``: deepest object/array nesting that is still descended
    """

    strict: bool = False
    encoding: str = "utf-8"
    errors: str = "surrogateescape"
    max_depth: int = 128

    def decode(self, raw: bytes) -> str:
        return raw.decode(self.encoding, self.errors)

    def encode(self, text: str) -> bytes:
        return text.encode(self.encoding, self.errors)


DEFAULT_OPTIONS = ParserOptions()
