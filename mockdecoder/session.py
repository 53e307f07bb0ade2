"""
One decoder connection.

A session waits on exactly one thing at a time: whichever of "a request line
arrived" and "the push timer fired" completes first. The other stays pending
for the next iteration, so replies and pushes on a connection are written
strictly one after another and never interleave.
"""

import asyncio
import contextlib
import traceback
from datetime import datetime

from .commands import handle_command
from .passing import generate_passing

STATE_AWAITING = "AWAITING"
STATE_PUSHING = "PUSHING"


async def read_request(reader) -> bytes:
    """Read one request line; b"" means EOF.

    A line longer than the reader's buffer limit is consumed and returned as
    a blank line so the session drops it and keeps going.
    """
    oversize = False
    while True:
        try:
            line = await reader.readuntil(b"\n")
        except asyncio.IncompleteReadError as e:
            return b"" if oversize else e.partial
        except asyncio.LimitOverrunError as e:
            await reader.readexactly(e.consumed)
            oversize = True
            continue
        return b"\n" if oversize else line


class Ticker:
    """Fixed-rate timer anchored at construction.

    The first tick is due one full period after creation. A tick that is
    late does not move the schedule; missed ticks are delivered back to back.
    """

    def __init__(self, period: float):
        self.period = period
        self.deadline = asyncio.get_running_loop().time() + period

    async def wait(self):
        delay = self.deadline - asyncio.get_running_loop().time()
        if delay > 0:
            await asyncio.sleep(delay)
        self.deadline += self.period


class Session:
    def __init__(self, pool, interval: float, mirror=None, clock=datetime.now):
        self.pool = pool
        self.interval = interval
        self.mirror = mirror
        self.clock = clock
        self.push_enabled = False
        self.passing_number = 1
        self.peer = None

    @property
    def state(self) -> str:
        return STATE_PUSHING if self.push_enabled else STATE_AWAITING

    async def run(self, reader, writer):
        """Serve one connection until EOF or an I/O error."""
        self.peer = writer.get_extra_info("peername")
        print(f"[decoder] connected from {self.peer}")
        ticker = Ticker(self.interval)
        read_task = None
        tick_task = None
        try:
            while True:
                if read_task is None:
                    read_task = asyncio.ensure_future(read_request(reader))
                if tick_task is None:
                    tick_task = asyncio.ensure_future(ticker.wait())

                done, _ = await asyncio.wait(
                    {read_task, tick_task}, return_when=asyncio.FIRST_COMPLETED
                )

                if read_task in done:
                    data = read_task.result()
                    read_task = None
                    if not data:
                        break  # EOF
                    await self.handle_line(data.decode("ascii", errors="replace"), writer)
                else:
                    tick_task = None
                    await self.handle_tick(writer)
        except (asyncio.IncompleteReadError, ConnectionError) as e:
            print(f"[decoder] connection from {self.peer} lost: {e!r}")
        except Exception as e:
            print(f"[decoder] connection error: {e}")
            traceback.print_exc()
        finally:
            pending = [task for task in (read_task, tick_task) if task is not None]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            writer.close()
            with contextlib.suppress(ConnectionError):
                await writer.wait_closed()
            print(f"[decoder] connection from {self.peer} closed")

    async def handle_line(self, line: str, writer):
        msg = line.strip()
        if not msg:
            return
        print(f"[decoder][rx] {self.peer} {msg}")
        response, push = handle_command(msg)
        if response is not None:
            writer.write(response)
            await writer.drain()
        if push is not None:
            self.push_enabled = push

    async def handle_tick(self, writer):
        if not self.push_enabled:
            return
        record = generate_passing(self.passing_number, self.pool, self.clock())
        line = record.to_line()
        print(f"[decoder][tx] {self.peer} {line}")
        writer.write(record.encode())
        await writer.drain()
        self.passing_number += 1
        if self.mirror is not None:
            await self.mirror.publish(line)
