import random

from pipeline.formatter import QUALIFYING_ADJECTIVES, format_alert, readable_name, readable_speed


def test_readable_name():
    assert readable_name("433 Eros (A898 PA)") == "A898 PA"
    assert readable_name("(2010 PK9)") == "2010 PK9"
    assert readable_name("Apophis") == "Apophis"
    assert readable_name("broken (name") == "broken (name"
    assert readable_name("empty ()") == "empty ()"


def test_readable_speed():
    assert readable_speed("12.345678") == "12.3"
    assert readable_speed("12.34") == "12.34"
    assert readable_speed("12") == "12"


def test_format_alert(make_object):
    obj = make_object("3542519", approach_date="2016-09-08", name="(2010 PK9)")
    message = format_alert(obj, "Earth", rng=random.Random(0))
    adjective = random.Random(0).choice(QUALIFYING_ADJECTIVES)
    assert message == (
        f"🔭 a #{adjective} #asteroid 2010 PK9, Ø ~0.20 km and ~12.3 km/s is coming close to #Earth "
        "on Sep. 08 (details here http://ssd.jpl.nasa.gov/sbdb.cgi?sstr=3542519)"
    )
