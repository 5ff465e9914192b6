import pytest

from volrender.timing import MAX_NO_DURATIONS, Timing


def test_first_duration_is_filtered_value():
    timing = Timing()
    timing.add_duration(4.0)
    assert timing.filtered_duration == 4.0
    assert timing.count == 1


def test_second_duration_replaces_first():
    timing = Timing()
    timing.add_duration(4.0)
    timing.add_duration(8.0)
    assert timing.filtered_duration == 8.0
    assert timing.durations == [8.0]


def test_average_over_recent_values():
    timing = Timing()
    for value in (1.0, 2.0, 4.0, 6.0):
        timing.add_duration(value)
    assert timing.filtered_duration == pytest.approx((6.0 + 4.0 + 2.0) / 3)
    assert timing.durations == [6.0, 4.0, 2.0]


def test_count_is_capped():
    timing = Timing()
    for value in range(100):
        timing.add_duration(float(value))
    assert timing.count == MAX_NO_DURATIONS
    assert len(timing.durations) <= MAX_NO_DURATIONS


def test_steady_input_gives_steady_output():
    timing = Timing()
    for _ in range(50):
        timing.add_duration(5.0)
    assert timing.filtered_duration == pytest.approx(5.0)


def test_capped_average_covers_full_window():
    timing = Timing()
    for value in range(100):
        timing.add_duration(float(value))
    expected = sum(range(100 - MAX_NO_DURATIONS, 100)) / MAX_NO_DURATIONS
    assert timing.filtered_duration == pytest.approx(expected)


def test_named_timing_prints_its_name(capsys):
    timing = Timing("Render")
    assert timing.name == "Render"
    assert capsys.readouterr().out == "Render"


def test_unnamed_timing_prints_nothing(capsys):
    Timing()
    assert capsys.readouterr().out == ""