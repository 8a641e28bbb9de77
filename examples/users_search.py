#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from rbx.timeline import NoPreviousCursorError, RobloxUsersClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search users and walk the result timeline")
    p.add_argument("keyword", nargs="?", default="test")
    p.add_argument("-v", "--verbose", action="store_true", help="log page fetches")
    return p.parse_args()


def show(title: str, users) -> None:
    print("=" * 65)
    print(title)
    print("-" * 65)
    for u in users:
        print(f"{u.id:>12} | {u.name:24} | {u.display_name}")


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    async with RobloxUsersClient() as users:
        timeline = await users.search(args.keyword)
        show("Current page", timeline.current().items)

        if timeline.current().has_next:
            ahead = await timeline.forward()
            show("Next page", ahead.items)

        try:
            await timeline.backwards()
        except NoPreviousCursorError as e:
            print("=" * 65)
            print(f"Backwards from the first page: {e}")


if __name__ == "__main__":
    asyncio.run(main())
