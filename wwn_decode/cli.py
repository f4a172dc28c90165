"""Command-line interface for wwn-decode."""

import argparse
import sys
from typing import List, Optional

from .constants import _CACHE_PATH, _FETCH_TIMEOUT, _REGISTRY_URL


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="wwn-decode",
        description=(
            "Decode Fibre Channel / SAS World Wide Names (NAA 1, 2, 5, 6)\n"
            "into NAA, OUI, vendor sequence and extension, and resolve the\n"
            "OUI to a vendor name using the IEEE OUI registry."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    p.add_argument(
        "wwn", nargs="*",
        help="WWN(s) to decode, e.g. 50:06:01:60:08:60:2c:04 "
             "(read one per line from stdin when omitted)",
    )

    # Registry
    reg = p.add_argument_group("OUI registry")
    reg.add_argument(
        "--no-vendor", action="store_true",
        help="Skip vendor name lookup entirely",
    )
    reg.add_argument(
        "--offline", action="store_true",
        help="Use the cached registry only, never download it",
    )
    reg.add_argument(
        "--update-registry", action="store_true",
        help="Download the registry now and refresh the cache file",
    )
    reg.add_argument(
        "--cache-path", metavar="FILE",
        help=f"Registry cache file (default: {_CACHE_PATH})",
    )
    reg.add_argument(
        "--registry-url", metavar="URL",
        help=f"Registry download URL (default: {_REGISTRY_URL})",
    )
    reg.add_argument(
        "--timeout", type=float, default=None, metavar="SEC",
        help=f"Download timeout in seconds (default: {_FETCH_TIMEOUT:g})",
    )

    # Output
    out = p.add_argument_group("Output")
    out.add_argument(
        "--output", choices=["csv", "json", "jsonl"],
        help="Machine-readable output format (default: human-readable)",
    )
    out.add_argument(
        "-o", "--output-file", metavar="FILE",
        help="Output file path for --output (default: - for stdout)",
    )

    misc = p.add_argument_group("Misc")
    misc.add_argument("-v", "--verbose", action="store_true",
                      help="Print registry loading status to stderr")
    misc.add_argument("-q", "--quiet", action="store_true",
                      help="Print only the bracketed form and vendor name")
    misc.add_argument("--config", metavar="FILE",
                      help="Path to configuration file (TOML or JSON)")

    return p


def _read_inputs(args) -> List[str]:
    if args.wwn:
        return list(args.wwn)
    if sys.stdin.isatty():
        return []
    return [line.strip() for line in sys.stdin if line.strip()]


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Merge config file
    from .config import load_config, merge_with_cli
    cfg = load_config(args.config)
    if cfg:
        merge_with_cli(args, cfg)

    from .lookup import OuiRegistry, OuiRegistrySource
    registry = None
    if not args.no_vendor or args.update_registry:
        registry = OuiRegistry(
            source=OuiRegistrySource(timeout=args.timeout or _FETCH_TIMEOUT),
            cache_path=args.cache_path or _CACHE_PATH,
            url=args.registry_url or _REGISTRY_URL,
            offline=bool(args.offline),
            verbose=bool(args.verbose),
        )

    if args.update_registry:
        count = registry.update()
        if not count:
            print("Error: OUI registry download failed", file=sys.stderr)
            return 1
        if not args.quiet:
            print(f"[*] OUI registry updated: {count} entries -> {registry.cache_path}",
                  file=sys.stderr)

    inputs = _read_inputs(args)
    if not inputs:
        if args.update_registry:
            return 0
        parser.print_usage(sys.stderr)
        return 2

    from .output import build_record, print_record, write_output
    lookup = None if args.no_vendor else registry
    records = [build_record(value, lookup) for value in inputs]

    if args.output:
        write_output(records, args.output, args.output_file or "-")
    else:
        for rec in records:
            if args.quiet:
                line = rec["nice"] or f"invalid: {rec['wwn']}"
                if rec["vendor"]:
                    line += f"  {rec['vendor']}"
                print(line)
            else:
                print_record(rec)

    invalid = [rec["wwn"] for rec in records if not rec["valid"]]
    if invalid:
        if not args.quiet:
            print(f"[!] {len(invalid)} invalid WWN(s): {', '.join(invalid)}",
                  file=sys.stderr)
        return 1
    return 0
