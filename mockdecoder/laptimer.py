#!/usr/bin/env python3
"""
Console lap timer for a decoder speaking the #P push protocol.

Connects to the decoder, switches on passing push and prints the lap time of
every transponder seen twice. Lap times longer than two minutes are treated as
the car having left the track and are not printed.
"""

import argparse
import socket

from .passing import parse_passing

MAX_LAP_SECONDS = 120.0


def passing_seconds(record) -> float:
    """Seconds since midnight of a passing's HH:MM:SS.mmm time field."""
    hours, minutes, seconds = record.time.split(":")
    return int(hours) * 3600 + int(minutes) * 60 + float(seconds)


class LapTracker:
    def __init__(self, max_lap: float = MAX_LAP_SECONDS):
        self.max_lap = max_lap
        self.last_seen = {}  # transponder -> seconds of last passing

    def update(self, record):
        """Record a passing; return the lap time if it closes a valid lap."""
        now = passing_seconds(record)
        previous = self.last_seen.get(record.transponder)
        self.last_seen[record.transponder] = now
        if previous is None:
            return None
        lap = now - previous
        if lap < 0:
            lap += 24 * 3600  # crossed midnight
        if 0 < lap <= self.max_lap:
            return lap
        return None


def main():
    parser = argparse.ArgumentParser(description='Print lap times from a timing decoder')
    parser.add_argument('--host', help='decoder host', default='127.0.0.1')
    parser.add_argument('--port', help='decoder port', default='3601')
    args = parser.parse_args()

    tracker = LapTracker()
    sock = socket.create_connection((args.host, int(args.port)))
    print(f"[laptimer] connected to {args.host}:{args.port}. Waiting for passings...")

    try:
        sock.sendall(b"SETPROTOCOL;2.0\r\nSETPUSHPASSINGS;1\r\n")
        stream = sock.makefile("r", encoding="ascii", newline="\r\n")
        for line in stream:
            record = parse_passing(line)
            if record is None:
                print(f"[laptimer] {line.strip()}")
                continue
            lap = tracker.update(record)
            if lap is not None:
                print(f"Transponder {record.transponder}: {lap:.1f} s")
        print("[laptimer] decoder closed the connection")
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
    finally:
        sock.close()


if __name__ == "__main__":
    main()
