"""Configuration file support for wwn-decode.

A config file holds defaults for the registry options (``registry_url``,
``cache_path``, ``timeout``, ``offline``) and the output options.  TOML is
read when the file name ends in ``.toml``; anything else is parsed as JSON.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

_CONFIG_ENV_VAR = "WWN_DECODE_CONFIG"
_CONFIG_DIR = os.path.expanduser("~/.config/wwn-decode")
_CONFIG_KEYS = {
    "registry_url", "cache_path", "timeout", "output",
    "verbose", "quiet", "offline",
}


def _candidate_paths(config_path: Optional[str]) -> List[str]:
    if config_path:
        return [config_path]
    env = os.environ.get(_CONFIG_ENV_VAR)
    if env:
        return [env]
    return [os.path.join(_CONFIG_DIR, name) for name in ("config.toml", "config.json")]


def _read_file(path: str) -> Any:
    if path.endswith(".toml"):
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib
        with open(path, "rb") as f:
            return tomllib.load(f)
    with open(path) as f:
        return json.load(f)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Return the first readable config mapping, or {}.

    An explicit *config_path* wins over ``$WWN_DECODE_CONFIG``, which wins
    over the files in ``~/.config/wwn-decode``.
    """
    for path in _candidate_paths(config_path):
        if not os.path.exists(path):
            continue
        try:
            data = _read_file(path)
        except (OSError, ValueError):
            continue
        if isinstance(data, dict):
            return data
    return {}


def merge_with_cli(args, config: Dict[str, Any]):
    """Copy known config keys onto *args* where the CLI left them unset."""
    for key, value in config.items():
        if key not in _CONFIG_KEYS or not hasattr(args, key):
            continue
        current = getattr(args, key)
        if current is None or current is False:
            setattr(args, key, value)
