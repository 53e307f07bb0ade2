import pytest

from mockdecoder.simulator import (
    DEFAULT_PORT,
    build_parser,
    parse_positive_float,
    parse_positive_int,
)


def test_defaults():
    args = build_parser().parse_args([])
    assert args.host == "0.0.0.0"
    assert int(args.listen) == DEFAULT_PORT == 3601
    assert parse_positive_int(args.transponders) == 10
    assert parse_positive_float(args.interval) == 1.0
    assert args.publish is None


def test_short_options():
    args = build_parser().parse_args(["-t", "25", "-i", "0.25"])
    assert parse_positive_int(args.transponders) == 25
    assert parse_positive_float(args.interval) == 0.25


@pytest.mark.parametrize("value", ["0", "-1", "ten", "1.5"])
def test_invalid_transponder_count(value):
    with pytest.raises(ValueError):
        parse_positive_int(value)


@pytest.mark.parametrize("value", ["0", "-0.5", "nan", "fast"])
def test_invalid_interval(value):
    with pytest.raises(ValueError):
        parse_positive_float(value)
