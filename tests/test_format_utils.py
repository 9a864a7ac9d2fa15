from datetime import timedelta

import pytest

from asset_converter.utils.format_utils import format_timedelta, formatted_size


def test_format_timedelta():
    assert format_timedelta(timedelta(seconds=7261)) == "02:01:01"
    assert format_timedelta(timedelta(0)) == "00:00:00"
    assert format_timedelta("not a timedelta") == "00:00:00"


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 B"),
        (-5, "0 B"),
        (512, "512 B"),
        (1536, "1.50 KB"),
        (2 * 1024 * 1024, "2 MB"),
        (3 * 1024**5, "3 PB"),
        (2048 * 1024**5, "2048 PB"),
    ],
)
def test_formatted_size(size, expected):
    assert formatted_size(size) == expected
