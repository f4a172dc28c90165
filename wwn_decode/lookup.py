"""OUI registry loading and vendor lookup for wwn-decode."""

import os
import re
import sys
import tempfile
import threading
from typing import Dict, Optional

import requests

from .constants import _CACHE_PATH, _FETCH_TIMEOUT, _REGISTRY_URL
from .decoder import oui as _wwn_oui
from .utils import normalize_oui

# XX-XX-XX   (hex)		Vendor Name
_OUI_LINE_RE = re.compile(
    r"^([0-9A-Fa-f]{2})-([0-9A-Fa-f]{2})-([0-9A-Fa-f]{2})\s+\([^)]*\)(.*)$"
)


def _status(msg: str, verbose: bool):
    if verbose:
        print(msg, file=sys.stderr)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_oui_registry(text: str) -> Dict[str, str]:
    """Parse IEEE ``oui.txt`` text into ``{"aabbcc": "Vendor Name"}``.

    Only the ``(hex)`` lines are used; everything else in the document
    (``(base 16)`` lines, addresses, headers) is skipped.
    """
    mapping: Dict[str, str] = {}
    for line in (text or "").splitlines():
        match = _OUI_LINE_RE.match(line)
        if not match:
            continue
        vendor = match.group(4).strip()
        if not vendor:
            continue
        key = (match.group(1) + match.group(2) + match.group(3)).lower()
        mapping[key] = vendor
    return mapping


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

class OuiRegistrySource:
    """Reads the raw registry text from a cache file or over HTTP.

    Every method absorbs its own failures and reports them as ``None`` (or
    ``False`` for writes).
    """

    def __init__(self, timeout: float = _FETCH_TIMEOUT):
        self.timeout = timeout

    def read_cache(self, path: str) -> Optional[str]:
        if not os.path.exists(path):
            return None
        try:
            with open(path, encoding="utf-8", errors="replace") as f:
                return f.read()
        except (OSError, ValueError):
            return None

    def fetch_network(self, url: str) -> Optional[str]:
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException:
            return None
        return response.text

    def write_cache(self, path: str, text: str) -> bool:
        # *path* only ever holds a complete document: write a sibling temp
        # file, then rename it into place.
        directory = os.path.dirname(path) or "."
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                    "w", encoding="utf-8", dir=directory,
                    prefix=".oui-", suffix=".tmp", delete=False) as f:
                tmp_path = f.name
                f.write(text)
            os.replace(tmp_path, path)
        except OSError:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass
            return False
        return True


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

class OuiRegistry:
    """Lazily loaded OUI -> vendor name mapping.

    The mapping is built on first use (cache file first, then the network
    with a cache write) and kept for the lifetime of the object.  A failed
    load is remembered as an empty mapping and is not retried.
    """

    def __init__(self, source: Optional[OuiRegistrySource] = None,
                 cache_path: str = _CACHE_PATH,
                 url: str = _REGISTRY_URL,
                 offline: bool = False,
                 verbose: bool = False):
        self.source = source if source is not None else OuiRegistrySource()
        self.cache_path = cache_path
        self.url = url
        self.offline = offline
        self.verbose = verbose
        self._mapping: Optional[Dict[str, str]] = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._mapping is not None

    @property
    def mapping(self) -> Dict[str, str]:
        if self._mapping is None:
            with self._lock:
                if self._mapping is None:
                    self._mapping = self._load()
        return self._mapping

    def _load(self) -> Dict[str, str]:
        text = self.source.read_cache(self.cache_path)
        if text is not None:
            mapping = parse_oui_registry(text)
            _status(f"[*] Loaded {len(mapping)} OUI entries from {self.cache_path}",
                    self.verbose)
            return mapping

        if self.offline:
            _status(f"[!] No OUI cache at {self.cache_path} (offline)", self.verbose)
            return {}

        return self._fetch() or {}

    def _fetch(self) -> Optional[Dict[str, str]]:
        _status(f"[*] Downloading OUI registry from {self.url}...", self.verbose)
        text = self.source.fetch_network(self.url)
        if text is None:
            _status("[!] OUI registry download failed; vendor names unavailable",
                    self.verbose)
            return None
        if not self.source.write_cache(self.cache_path, text):
            _status(f"[!] Could not write OUI cache to {self.cache_path}", self.verbose)
        mapping = parse_oui_registry(text)
        _status(f"[*] Downloaded {len(mapping)} OUI entries", self.verbose)
        return mapping

    def resolve(self, oui_key: str) -> Optional[str]:
        """Return the vendor name registered for *oui_key*, or None."""
        key = normalize_oui(oui_key)
        if not key:
            return None
        return self.mapping.get(key)

    def update(self) -> int:
        """Re-download the registry and replace the in-memory mapping.

        Returns the number of entries loaded, 0 on failure (the current
        mapping is left untouched).
        """
        with self._lock:
            mapping = self._fetch()
            if mapping is None:
                return 0
            self._mapping = mapping
            return len(mapping)


_default_registry: Optional[OuiRegistry] = None
_default_lock = threading.Lock()


def get_registry() -> OuiRegistry:
    """Return the process-wide registry, creating it on first call."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = OuiRegistry()
    return _default_registry


def vendor_from_wwn(value: str, registry: Optional[OuiRegistry] = None) -> Optional[str]:
    """Look up the vendor name for the OUI embedded in a WWN."""
    key = _wwn_oui(value)
    if key is None:
        return None
    if registry is None:
        registry = get_registry()
    return registry.resolve(key)
