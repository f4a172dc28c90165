"""Global constants for wwn-decode."""

import os
from typing import Dict, List, Optional, Tuple

# Network Address Authority codes understood by the decoder
_NAA_IEEE_48 = ("1", "2")          # IEEE 48-bit / IEEE extended
_NAA_REGISTERED = ("5", "6")       # IEEE registered / registered extended
_NAA_SUPPORTED: Tuple[str, ...] = _NAA_IEEE_48 + _NAA_REGISTERED

# Normalized lengths: 64-bit and 128-bit names
_VALID_LENGTHS = (16, 32)

# Shortest normalized string each NAA layout can be sliced from
_NAA_MIN_LENGTH: Dict[str, int] = {
    "1": 16,
    "2": 16,
    "5": 16,
    "6": 32,
}

# Field slices on the normalized hex string (start, end); None = to the end
_OUI_SLICE: Dict[str, Tuple[int, int]] = {
    "1": (4, 10),
    "2": (4, 10),
    "5": (1, 7),
    "6": (1, 7),
}
_SEQUENCE_SLICE: Dict[str, Tuple[int, Optional[int]]] = {
    "1": (10, None),
    "2": (10, None),
    "5": (7, None),
    "6": (7, 16),
}
_EXTENSION_START = 16

# Octet-aligned display groups used by the pretty printer
_DISPLAY_OUI_SLICE: Dict[str, Tuple[int, int]] = {
    "1": (4, 10),
    "2": (4, 10),
    "5": (2, 8),
    "6": (2, 8),
}
_DISPLAY_SEQUENCE_SLICE: Dict[str, Tuple[int, Optional[int]]] = {
    "1": (10, None),
    "2": (10, None),
    "5": (8, None),
    "6": (8, 16),
}

# OUI registry
_REGISTRY_URL = "https://standards-oui.ieee.org/oui/oui.txt"
_DATA_DIR = os.path.join(os.path.dirname(__file__), "data")
_CACHE_PATH = os.path.join(_DATA_DIR, "oui.txt")
_FETCH_TIMEOUT = 30.0  # seconds

# Output columns for CSV/JSON
_FIELDNAMES: List[str] = [
    "wwn", "valid", "naa", "oui", "vendor_sequence",
    "vendor_specific_extension", "nice", "vendor",
]
