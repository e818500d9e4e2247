#!/usr/bin/env python3
"""fedicodec - fetch an entity from a Mastodon server and print it."""

import asyncio

from fedicodec import main
from fedicodec.argparser import parse_arguments

if __name__ == "__main__":
    asyncio.run(main(parse_arguments()))
