import re
from datetime import datetime

from mockdecoder.passing import generate_passing, parse_passing, format_timestamp
from mockdecoder.transponders import TransponderPool

NOW = datetime(2024, 3, 9, 7, 5, 3, 42999)


def test_format_timestamp_has_millisecond_precision():
    assert format_timestamp(NOW) == ("2024-03-09", "07:05:03.042")


def test_generated_record_wire_format():
    pool = TransponderPool(["54321"])
    line = generate_passing(7, pool, NOW).encode()
    assert line == (
        b"#P;7;54321;2024-03-09;07:05:03.042;123456;10;-50;0000;1;1;1;1;3.0;25;0000;30;0\r\n"
    )


def test_record_has_seventeen_fields_after_marker():
    pool = TransponderPool.generate(10)
    fields = generate_passing(1, pool, datetime.now()).to_line().split(";")
    assert fields[0] == "#P"
    assert len(fields[1:]) == 17
    assert re.fullmatch(r"\d{5}", fields[2])
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", fields[3])
    assert re.fullmatch(r"\d{2}:\d{2}:\d{2}\.\d{3}", fields[4])


def test_parse_passing_reads_pushed_line():
    record = parse_passing("#P;12;54321;2024-03-09;07:05:03.042;123456;10;-50;0000;1;1;1;1;3.0;25;0000;30;0\r\n")
    assert record.passing_number == 12
    assert record.transponder == "54321"
    assert record.time == "07:05:03.042"
    assert record.box_reader_id == "0"


def test_parse_passing_rejects_other_lines():
    assert parse_passing("GETMODE;OPERATION") is None
    assert parse_passing("#P;1;54321") is None
    assert parse_passing("#P;x;54321;2024-03-09;07:05:03.042;123456;10;-50;0000;1;1;1;1;3.0;25;0000;30;0") is None
