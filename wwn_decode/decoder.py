"""WWN structural decoding for wwn-decode.

All functions accept raw input (colon-separated or bare, any case) and
normalize it before slicing.  A field that cannot be extracted is returned
as ``None``; nothing here raises on bad input.
"""

from typing import NamedTuple, Optional

from .constants import (
    _EXTENSION_START,
    _NAA_MIN_LENGTH,
    _OUI_SLICE,
    _SEQUENCE_SLICE,
    _VALID_LENGTHS,
)
from .utils import is_hex, normalize_wwn


class WwnFields(NamedTuple):
    wwn: str
    naa: str
    oui: str
    vendor_sequence: str
    vendor_specific_extension: Optional[str]


def is_valid(value: str) -> bool:
    """Return True if *value* is a 16 or 32 digit hex WWN once normalized."""
    wwn = normalize_wwn(value)
    return len(wwn) in _VALID_LENGTHS and is_hex(wwn)


def _naa(wwn: str) -> Optional[str]:
    # wwn is already normalized
    if not is_hex(wwn):
        return None
    code = wwn[0]
    min_len = _NAA_MIN_LENGTH.get(code)
    if min_len is None or len(wwn) < min_len:
        return None
    return code


def naa(value: str) -> Optional[str]:
    """Return the Network Address Authority digit ("1", "2", "5" or "6").

    ``None`` for unrecognized codes, non-hex input, and strings too short
    for the layout their NAA implies.
    """
    return _naa(normalize_wwn(value))


def oui(value: str) -> Optional[str]:
    """Return the 6 hex digit OUI embedded in the WWN."""
    wwn = normalize_wwn(value)
    code = _naa(wwn)
    if code is None:
        return None
    start, end = _OUI_SLICE[code]
    return wwn[start:end]


def vendor_sequence(value: str) -> Optional[str]:
    """Return the vendor-assigned serial bits following the OUI."""
    wwn = normalize_wwn(value)
    code = _naa(wwn)
    if code is None:
        return None
    start, end = _SEQUENCE_SLICE[code]
    return wwn[start:end]


def vendor_specific_extension(value: str) -> Optional[str]:
    """Return the trailing 64 bits of an NAA 6 name, else None."""
    wwn = normalize_wwn(value)
    if _naa(wwn) != "6":
        return None
    return wwn[_EXTENSION_START:]


def decode(value: str) -> Optional[WwnFields]:
    """Split a WWN into all of its fields, or None if the NAA is unknown."""
    wwn = normalize_wwn(value)
    code = _naa(wwn)
    if code is None:
        return None
    return WwnFields(
        wwn=wwn,
        naa=code,
        oui=oui(wwn),
        vendor_sequence=vendor_sequence(wwn),
        vendor_specific_extension=vendor_specific_extension(wwn),
    )
