"""
Native-id Cache Inspector

Hydrates an adapter's native-id storage from the SQL registry and prints
what ended up in the cache.

Usage::

    python -m secstore.scripts.cache_stats --adapter ig
    python -m secstore.scripts.cache_stats --adapter ibkr --lookup-id 265598
    python -m secstore.scripts.cache_stats --adapter ibkr --lookup-id 265598 --json
    python -m secstore.scripts.cache_stats --adapter binance --lookup-id BTCUSDT:spot
    python -m secstore.scripts.cache_stats --database-url sqlite:///other.db --adapter ig
"""

import argparse
import json
import logging
from typing import Any, List, Optional

from secstore.adapters import get_adapter_class
from secstore.config.settings import get_settings
from secstore.core.enums import NativeIdSource
from secstore.storage.database import check_database_health, init_db
from secstore.storage.repositories import SqlSecurityRegistry

logger = logging.getLogger(__name__)


def parse_native_id(source: NativeIdSource, raw: str) -> Any:
    """Turn a command-line id into the adapter's native id type."""
    if source == NativeIdSource.IBKR:
        return int(raw)
    if source == NativeIdSource.BINANCE:
        symbol, _, market = raw.partition(":")
        return symbol, market or "spot"
    return raw


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Inspect a native-id security cache",
    )
    parser.add_argument(
        "--adapter",
        choices=[s.value for s in NativeIdSource],
        default=NativeIdSource.IG.value,
        help="Trading system adapter (default: ig)",
    )
    parser.add_argument("--database-url", type=str, default=None, help="Registry database URL")
    parser.add_argument("--lookup-id", type=str, default=None, help="Native id to resolve")
    parser.add_argument("--json", action="store_true", help="Print the resolved security as JSON")
    parser.add_argument(
        "--quiet-hydration",
        action="store_true",
        help="Do not fire added notifications while hydrating",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-7s %(message)s",
    )

    init_db(url=args.database_url)
    health = check_database_health()
    if not health["healthy"]:
        print(f"Database unavailable: {health['error']}")
        return 1

    source = NativeIdSource(args.adapter)
    storage_cls = get_adapter_class(source)
    notify = False if args.quiet_hydration else None

    with storage_cls(SqlSecurityRegistry(), notify_on_hydration=notify) as storage:
        stats = storage.get_stats()
        print(f"\nNative-id cache: {stats['adapter']}")
        print(f"  Cached:        {stats['cached']}")
        print(f"  Registry ids:  {stats['registry_ids']}")
        print(f"  DB latency:    {health['latency_ms']} ms")

        if args.lookup_id is not None:
            try:
                native_id = parse_native_id(source, args.lookup_id)
            except ValueError:
                print(f"  Invalid {source.value} id: {args.lookup_id}")
                return 2
            security = storage.get_by_native_id(native_id)
            if security is None:
                print(f"  {args.lookup_id}: not cached")
            else:
                print(f"  {args.lookup_id}: {security.security_id} ({security.name})")
                if args.json:
                    print(json.dumps(security.to_dict(), indent=2))
        print()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
