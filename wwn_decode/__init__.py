"""wwn-decode: World Wide Name decoder with IEEE OUI vendor lookup."""

from .decoder import (
    WwnFields, decode, is_valid, naa, oui, vendor_sequence,
    vendor_specific_extension,
)
from .lookup import (
    OuiRegistry, OuiRegistrySource, get_registry, parse_oui_registry,
    vendor_from_wwn,
)
from .output import build_record, nice_wwn, vendor_specific_nice_wwn
from .utils import colon_pairs, normalize_oui, normalize_wwn

__version__ = "1.0.0"
__all__ = [
    "WwnFields",
    "decode",
    "is_valid",
    "naa",
    "oui",
    "vendor_sequence",
    "vendor_specific_extension",
    "OuiRegistry",
    "OuiRegistrySource",
    "get_registry",
    "parse_oui_registry",
    "vendor_from_wwn",
    "build_record",
    "nice_wwn",
    "vendor_specific_nice_wwn",
    "colon_pairs",
    "normalize_oui",
    "normalize_wwn",
]
