#!/usr/bin/env python3
"""
Mock timing decoder.

Listens for TCP clients speaking the decoder's text protocol and, once a
client sends SETPUSHPASSINGS;1, pushes a synthetic passing every interval
for one of a fixed pool of random transponders.

Usage:
    python -m mockdecoder.simulator -t 20 -i 0.5

    Serves on port 3601 with 20 transponders, one passing every 0.5 seconds
    per connection in push mode. Add --publish 5556 to mirror every pushed
    passing on a ZMQ PUB socket.
"""

import argparse
import asyncio
import sys

from .mirror import Mirror
from .session import Session
from .transponders import TransponderPool

if sys.platform == 'win32':
    asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

DEFAULT_PORT = 3601


def parse_positive_int(value: str) -> int:
    count = int(value)
    if count < 1:
        raise ValueError(f"expected a positive integer, got {value}")
    return count


def parse_positive_float(value: str) -> float:
    number = float(value)
    if not number > 0:
        raise ValueError(f"expected a positive number, got {value}")
    return number


class Decoder:
    def __init__(self, pool: TransponderPool, interval: float, mirror=None):
        self.pool = pool
        self.interval = interval
        self.mirror = mirror

    async def handle_client(self, reader, writer):
        session = Session(self.pool, self.interval, mirror=self.mirror)
        await session.run(reader, writer)

    async def start(self, host: str, port: int):
        return await asyncio.start_server(self.handle_client, host, port)


def build_parser():
    parser = argparse.ArgumentParser(description='Simulate a transponder timing decoder over TCP')
    parser.add_argument('--host', help='listen address', default='0.0.0.0')
    parser.add_argument('--listen', help=f'decoder protocol listen port (default: {DEFAULT_PORT})', default=str(DEFAULT_PORT))
    parser.add_argument('-t', '--transponders', help='number of random transponders to simulate (default: 10)', default='10')
    parser.add_argument('-i', '--interval', help='seconds between passings (default: 1.0)', default='1.0')
    parser.add_argument('--publish', help='also publish passings on this ZMQ PUB port')
    return parser


async def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        count = parse_positive_int(args.transponders)
        interval = parse_positive_float(args.interval)
        port = int(args.listen)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    pool = TransponderPool.generate(count)
    print(f"[decoder] simulating {count} transponders every {interval} seconds")
    print(f"[decoder] transponders: {' '.join(pool)}")

    mirror = Mirror(f"tcp://*:{args.publish}") if args.publish else None
    decoder = Decoder(pool, interval, mirror=mirror)

    server = await decoder.start(args.host, port)
    print(f"[decoder] listening on {args.host}:{port}")
    try:
        async with server:
            await server.serve_forever()
    finally:
        if mirror:
            mirror.close()


def run():
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("bye")


if __name__ == "__main__":
    run()
