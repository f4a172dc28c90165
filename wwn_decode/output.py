"""Pretty-printing, record building and CSV/JSON/JSONL output for wwn-decode."""

import csv
import json
import sys
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .constants import _DISPLAY_OUI_SLICE, _DISPLAY_SEQUENCE_SLICE, _FIELDNAMES
from .decoder import decode, is_valid
from .utils import colon_pairs, normalize_wwn

if TYPE_CHECKING:
    from .lookup import OuiRegistry


# ---------------------------------------------------------------------------
# Pretty printing
# ---------------------------------------------------------------------------

def _bracket(hexstr: str) -> str:
    return f"[{colon_pairs(hexstr)}]"


def vendor_specific_nice_wwn(value: str) -> str:
    """Return ``[vendor sequence]`` plus ``[extension]`` for NAA 6 names.

    Groups are octet aligned, so ``50:06:01:60:08:60:2c:04`` gives
    ``[08:60:2c:04]``.  Returns "" when the WWN cannot be decoded.
    """
    fields = decode(value)
    if fields is None:
        return ""
    start, end = _DISPLAY_SEQUENCE_SLICE[fields.naa]
    out = _bracket(fields.wwn[start:end])
    if fields.vendor_specific_extension:
        out += _bracket(fields.vendor_specific_extension)
    return out


def nice_wwn(value: str) -> str:
    """Return the bracketed form ``[naa][oui][vendor sequence]([extension])``.

    >>> nice_wwn("50:06:01:60:08:60:2c:04")
    '[5][06:01:60][08:60:2c:04]'
    """
    fields = decode(value)
    if fields is None:
        return ""
    start, end = _DISPLAY_OUI_SLICE[fields.naa]
    return (f"[{fields.naa}]"
            + _bracket(fields.wwn[start:end])
            + vendor_specific_nice_wwn(fields.wwn))


# ---------------------------------------------------------------------------
# Record building
# ---------------------------------------------------------------------------

def build_record(value: str,
                 registry: Optional["OuiRegistry"] = None) -> Dict[str, Any]:
    """Build a flat decode record for output.

    Vendor names are only looked up when a *registry* is given.
    """
    wwn = normalize_wwn(value)
    fields = decode(wwn)
    vendor = None
    if fields is not None and registry is not None:
        vendor = registry.resolve(fields.oui)

    return {
        "wwn": colon_pairs(wwn),
        "valid": int(is_valid(wwn)),
        "naa": fields.naa if fields else "",
        "oui": fields.oui if fields else "",
        "vendor_sequence": fields.vendor_sequence if fields else "",
        "vendor_specific_extension": (fields.vendor_specific_extension or "")
        if fields else "",
        "nice": nice_wwn(wwn),
        "vendor": vendor or "",
    }


# ---------------------------------------------------------------------------
# Console output
# ---------------------------------------------------------------------------

def _sep(char="=", width=60):
    return char * width


def print_record(record: Dict[str, Any], fh=None):
    """Print a formatted decode result."""
    if fh is None:
        fh = sys.stdout
    print(_sep(), file=fh)
    print(f"  {'WWN':<14}: {record.get('wwn', '')}", file=fh)
    if not record.get("valid"):
        print(f"  {'Status':<14}: invalid WWN", file=fh)
    if record.get("nice"):
        print(f"  {'Decoded':<14}: {record['nice']}", file=fh)
        print(f"  {'NAA':<14}: {record.get('naa', '')}", file=fh)
        print(f"  {'OUI':<14}: {record.get('oui', '')}", file=fh)
        print(f"  {'Vendor seq':<14}: {record.get('vendor_sequence', '')}", file=fh)
    if record.get("vendor_specific_extension"):
        print(f"  {'Extension':<14}: {record['vendor_specific_extension']}", file=fh)
    if record.get("vendor"):
        print(f"  {'Vendor':<14}: {record['vendor']}", file=fh)
    print(_sep(), file=fh)


# ---------------------------------------------------------------------------
# Batch output
# ---------------------------------------------------------------------------

def write_output(records: List[Dict[str, Any]], fmt: str, output_file: str = "-"):
    """Write decode records as csv, json or jsonl to a file or stdout."""
    if not records:
        return

    out = output_file or "-"
    fh = sys.stdout if out == "-" else open(out, "w", newline="")

    try:
        rows = [{k: rec.get(k, "") for k in _FIELDNAMES} for rec in records]
        if fmt == "csv":
            writer = csv.DictWriter(fh, fieldnames=_FIELDNAMES)
            writer.writeheader()
            writer.writerows(rows)
        elif fmt == "json":
            json.dump(rows, fh, indent=2)
            fh.write("\n")
        elif fmt == "jsonl":
            for row in rows:
                fh.write(json.dumps(row) + "\n")
    finally:
        if fh is not sys.stdout:
            fh.close()
