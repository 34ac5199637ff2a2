from datetime import date, datetime

import pytest

from memento.utils import format_runtime_minutes, to_iso_date


@pytest.mark.parametrize(
    "minutes, expected",
    [(None, "0m"), (0, "0m"), (-5, "0m"), (45, "45m"), (120, "2h"), (139, "2h 19m"), ("90", "1h 30m")],
)
def test_format_runtime_minutes(minutes, expected):
    assert format_runtime_minutes(minutes) == expected


def test_to_iso_date():
    assert to_iso_date(date(2024, 1, 1)) == "2024-01-01"
    assert to_iso_date(datetime(2024, 1, 1, 20, 30)) == "2024-01-01"
    assert to_iso_date(" 2024-01-01 ") == "2024-01-01"
    assert to_iso_date(None) is None
