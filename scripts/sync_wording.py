#!/usr/bin/env python3
"""Bootstrap the wording cache, run one remote sync and print the result.

Usage
-----
Set environment variables and run::

    export WORDING_BUNDLED_DIR=./wording/bundled
    export WORDING_PERSISTED_DIR=~/.cache/app/wording
    export WORDING_LOCALES=en,fr,de
    export WORDING_BASE_LOCALE=en
    export WORDING_REMOTE_URL="https://cdn.example.com/wording/{locale}.json"
    python scripts/sync_wording.py

Options::

    --locale fr          Print this locale instead of the active one
    --key errors.title   Print a single dotted key instead of the whole wording
    --offline            Skip the remote sync (bundled + persisted only)
    -v / --verbose       Debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pywording import CatalogWording, WordingConfig, WordingError, WordingManager  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--locale", help="Locale to print (default: active locale)")
    parser.add_argument("--key", help="Dotted wording key to print")
    parser.add_argument("--offline", action="store_true", help="Do not contact the remote source")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )

    overrides = {"remote_url": None} if args.offline else {}
    try:
        config = WordingConfig.from_env(**overrides)
        manager, provider = await WordingManager.from_config(config, CatalogWording)
    except WordingError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        await manager.wait_idle()
        wording = manager.wording_for(args.locale) if args.locale else manager.wording
        if args.key:
            value = wording.get(args.key)
            if value is None:
                print(f"error: no wording for key {args.key!r}", file=sys.stderr)
                return 1
            print(json.dumps(value, indent=2, ensure_ascii=False))
        else:
            print(json.dumps(wording.model_dump(by_alias=True, exclude_none=True), indent=2, ensure_ascii=False))
    finally:
        manager.close()
        await provider.__aexit__(None, None, None)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
