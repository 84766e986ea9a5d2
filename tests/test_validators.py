from datetime import date
from gameplan.utils.validators import (
    validate_time, validate_time_slot, validate_date_range, validate_player_bounds, validate_pattern
)
from gameplan.utils.timeslots import display_date, sunday_weekday


def _pattern(**overrides):
    data = {
        'name': 'Pickup',
        'frequency': 'custom',
        'interval': 2,
        'day_of_week': 6,
        'start_time': '10:00',
        'end_time': '12:00',
        'location': 'Court A',
        'min_players': 4,
        'max_players': 10,
        'start_date': date(2024, 1, 1),
        'end_date': date(2024, 6, 30)
    }
    data.update(overrides)
    return data


def test_validate_time():
    assert validate_time('07:30') == (True, None)
    assert validate_time('23:59')[0] is True
    assert validate_time('24:00')[0] is False
    assert validate_time('7pm')[0] is False


def test_validate_time_slot():
    assert validate_time_slot('09:00-11:00') == (True, None)
    assert validate_time_slot('09:00')[0] is False


def test_validate_date_range():
    assert validate_date_range(date(2024, 1, 1), date(2024, 1, 2)) == (True, None)
    assert validate_date_range(date(2024, 1, 2), date(2024, 1, 2))[0] is False


def test_validate_player_bounds():
    assert validate_player_bounds(2, 2) == (True, None)
    assert validate_player_bounds(0, 10)[0] is False
    assert validate_player_bounds(12, 10) == (False, 'Min players cannot exceed max players')


def test_validate_pattern():
    assert validate_pattern(_pattern()) == (True, None)
    assert validate_pattern(_pattern(frequency='daily'))[0] is False
    assert validate_pattern(_pattern(interval=0))[0] is False
    assert validate_pattern(_pattern(start_time='25:00'))[0] is False
    assert validate_pattern(_pattern(location='  '))[0] is False


def test_display_date_and_weekday():
    assert display_date(date(2024, 1, 7)) == '1/7/2024'
    assert sunday_weekday(date(2024, 1, 7)) == 0
    assert sunday_weekday(date(2024, 1, 13)) == 6
