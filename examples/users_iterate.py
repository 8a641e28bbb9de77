#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from rbx.timeline import RobloxUsersClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream search results user by user")
    p.add_argument("keyword", nargs="?", default="test")
    p.add_argument("limit", nargs="?", type=int, default=250)
    p.add_argument("--prefetch", type=int, default=0, help="users to fetch up front")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)

    async with RobloxUsersClient() as users:
        iterator = await users.iterate_search(args.keyword, prefetch=args.prefetch)
        print(f"Buffered up front: {iterator.buffered}")
        for i, user in enumerate(await iterator.take(args.limit), start=1):
            print(f"{i:>5} | {user.id:>12} | {user.name}")
        print(f"More available: {await iterator.has_remaining()}")


if __name__ == "__main__":
    asyncio.run(main())
