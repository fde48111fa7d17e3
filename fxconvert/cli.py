"""Command-line front end for the currency converter."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from fxconvert.api import ApiError, CurrencyAPI, LiveCurrencyAPI
from fxconvert.cache import Cache, FileCache
from fxconvert.config import ConfigError, get_env, load_env
from fxconvert.converter import convert
from fxconvert.models import Args
from fxconvert.storage import StorageError

_TRUE_WORDS = {"1", "t", "T", "true", "TRUE", "True"}
_FALSE_WORDS = {"0", "f", "F", "false", "FALSE", "False"}

# Environment variables read at start-up, in the order they are checked.
_ENV_NAMES = ("API_KEY", "BASE_URL", "CACHE_FILE")


class UsageError(Exception):
    """Raised when the command-line options do not describe a conversion."""


def _parse_bool(text: str) -> bool:
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value {text!r}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fxconvert", allow_abbrev=False)
    parser.add_argument("-amount", "--amount", type=float, default=0.0, help="Amount of currency")
    parser.add_argument("-from", "--from", dest="from_code", default="", help="From currency")
    parser.add_argument("-to", "--to", dest="to_code", default="", help="To currency")
    parser.add_argument(
        "-list",
        "--list",
        dest="list_codes",
        nargs="?",
        const=True,
        default=False,
        type=_parse_bool,
        help="List all available currencies",
    )
    parser.add_argument(
        "-refresh",
        "--refresh",
        nargs="?",
        const=True,
        default=False,
        type=_parse_bool,
        help="Refresh cache",
    )
    parser.add_argument("rest", nargs="*", help=argparse.SUPPRESS)
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Args:
    """Parse and validate command-line options."""
    namespace = _build_parser().parse_args(argv)
    args = Args(
        amount=namespace.amount,
        from_code=namespace.from_code,
        to_code=namespace.to_code,
        list_codes=namespace.list_codes,
        refresh=namespace.refresh,
    )
    if args.list_codes:
        return args
    if args.amount == 0:
        raise UsageError("zero value of currency")
    if not args.from_code or not args.to_code:
        raise UsageError("empty string of currency converts")
    return args


def cache_key(args: Args) -> str:
    """Return the cache key for the requested currency pair."""
    return f"{args.from_code}_{args.to_code}"


def print_supported_codes(codes: Sequence[Sequence[str]]) -> None:
    """Print one supported currency per line."""
    if not codes:
        print("No supported codes found.")
        return
    print("Supported Codes:", file=sys.stderr)
    for code in codes:
        print(" | ".join(code))


def print_conversion_result(amount: float, result: float, from_code: str, to_code: str) -> None:
    """Print a finished conversion."""
    print(f"Converted {amount:.2f} {from_code} to {result:.2f} {to_code}")


def _show_conversion(amount: float, rate: float, from_code: str, to_code: str) -> None:
    print_conversion_result(amount, convert(amount, rate), from_code, to_code)


def run(api: CurrencyAPI, args: Args, cache: Cache) -> None:
    """List codes or convert an amount, using the cache unless asked to refresh."""
    if args.list_codes:
        print_supported_codes(api.get_supported_codes())
        return
    key = cache_key(args)
    cached_rate = cache.get(key)
    if cached_rate is not None and not args.refresh:
        _show_conversion(args.amount, cached_rate, args.from_code, args.to_code)
        return
    conversion = api.get_pair_conversion(args.from_code, args.to_code)
    cache.set(key, conversion.conversion_rate)
    _show_conversion(args.amount, conversion.conversion_rate, args.from_code, args.to_code)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter from the command line and return the exit status."""
    load_env()
    try:
        access, base_url, cache_path = (get_env(name) for name in _ENV_NAMES)
        args = parse_args(argv)
        run(LiveCurrencyAPI(f"{base_url}/{access}"), args, FileCache(cache_path))
    except (ConfigError, UsageError, ApiError, StorageError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())