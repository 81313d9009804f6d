"""Lookup outcome sentinels for VCFG Core."""

from __future__ import annotations


class _Missing:
    """Singleton returned when a section, key or value does not exist."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Missing"

    def __bool__(self) -> bool:
        return False


class _Invalid:
    """Singleton returned when a value exists but cannot be converted."""

    _instance: "_Invalid | None" = None

    def __new__(cls) -> "_Invalid":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Invalid"

    def __bool__(self) -> bool:
        return False


Missing = _Missing()
Invalid = _Invalid()
