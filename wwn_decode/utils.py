"""Utility helpers for wwn-decode."""

import re

_HEX_RE = re.compile(r"[0-9a-f]+")


def normalize_wwn(value: str) -> str:
    """Strip ``:`` separators and lower-case a WWN string."""
    return (value or "").replace(":", "").lower()


def normalize_oui(value: str) -> str:
    """Return an OUI as a bare lower-case key (``00:60:16`` -> ``006016``)."""
    return re.sub(r"[:\-\.]", "", value or "").lower()


def is_hex(value: str) -> bool:
    return bool(value) and _HEX_RE.fullmatch(value) is not None


def colon_pairs(hexstr: str) -> str:
    """Group a hex string into colon-separated octets: ``aabbc`` -> ``aa:bb:c``."""
    return ":".join(hexstr[i:i+2] for i in range(0, len(hexstr), 2))
