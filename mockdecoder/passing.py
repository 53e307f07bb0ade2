"""
Passing records in the decoder's push format:

    #P;<passing>;<transponder>;<date>;<time>;<eventId>;<hits>;<maxRSSI>;
       <internalData>;<isActive>;<channel>;<loopId>;<loopIdWakeup>;<battery>;
       <temperature>;<internalActiveData>;<boxTemp>;<boxReaderId>\r\n

Only the passing number, transponder and timestamp vary; the rest are fixed
placeholder values that must still be present and in place.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

PASSING_PREFIX = "#P"
FIELD_COUNT = 17


@dataclass(frozen=True)
class PassingRecord:
    passing_number: int
    transponder: str
    date: str
    time: str
    event_id: str = "123456"
    hits: str = "10"
    max_rssi: str = "-50"
    internal_data: str = "0000"
    is_active: str = "1"
    channel: str = "1"
    loop_id: str = "1"
    loop_id_wakeup: str = "1"
    battery: str = "3.0"
    temperature: str = "25"
    internal_active_data: str = "0000"
    box_temp: str = "30"
    box_reader_id: str = "0"

    def fields(self) -> list:
        return [
            str(self.passing_number),
            self.transponder,
            self.date,
            self.time,
            self.event_id,
            self.hits,
            self.max_rssi,
            self.internal_data,
            self.is_active,
            self.channel,
            self.loop_id,
            self.loop_id_wakeup,
            self.battery,
            self.temperature,
            self.internal_active_data,
            self.box_temp,
            self.box_reader_id,
        ]

    def to_line(self) -> str:
        return ";".join([PASSING_PREFIX] + self.fields())

    def encode(self) -> bytes:
        return (self.to_line() + "\r\n").encode("ascii")


def format_timestamp(now: datetime) -> tuple[str, str]:
    """Split a timestamp into (YYYY-MM-DD, HH:MM:SS.mmm)."""
    return now.strftime("%Y-%m-%d"), f"{now:%H:%M:%S}.{now.microsecond // 1000:03d}"


def generate_passing(passing_number: int, pool, now: datetime) -> PassingRecord:
    date, time = format_timestamp(now)
    return PassingRecord(passing_number, pool.pick_random(), date, time)


def parse_passing(line: str) -> Optional[PassingRecord]:
    parts = line.strip().split(";")
    if len(parts) != FIELD_COUNT + 1 or parts[0] != PASSING_PREFIX:
        return None
    try:
        passing_number = int(parts[1])
    except ValueError:
        return None
    return PassingRecord(passing_number, *parts[2:])
