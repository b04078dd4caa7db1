from datetime import date, datetime

import pytest

from src.date_utilities.date_utilities.core.exceptions import InvalidArgument
from src.date_utilities.date_utilities.helper.result import Result, returns_result
from src.date_utilities.date_utilities.helper.service import DateTimeHelper


def test_result_success_and_failure():
    ok = Result.success(3)
    assert ok.ok
    assert ok.unwrap() == 3
    assert ok.value_or(0) == 3

    error = InvalidArgument("bad")
    failed = Result.failure(error)
    assert not failed.ok
    assert failed.error is error
    assert failed.value_or(0) == 0
    with pytest.raises(InvalidArgument, match="bad"):
        failed.unwrap()


def test_returns_result_only_captures_invalid_argument():
    @returns_result
    def explode(kind: str) -> int:
        if kind == "argument":
            raise InvalidArgument("argument")
        raise RuntimeError("other")

    assert explode.__name__ == "try_explode"
    assert not explode("argument").ok
    with pytest.raises(RuntimeError):
        explode("runtime")


def test_try_operations_return_results():
    helper = DateTimeHelper(locale="en_US")

    assert helper.try_parse_date("2024-01-15", "yyyy-MM-dd") == Result.success(date(2024, 1, 15))
    assert helper.try_parse_date_time("2024-01-15 13:45", "yyyy-MM-dd HH:mm").unwrap() == datetime(2024, 1, 15, 13, 45)
    assert helper.try_format_with_pattern(datetime(2024, 1, 15), "yyyy").unwrap() == "2024"
    assert helper.try_minutes_between(datetime(2024, 1, 1), datetime(2024, 1, 1, 0, 30)).unwrap() == 30
    assert helper.try_format_full_localized(datetime(2024, 1, 15, 13, 45), "de_DE").unwrap() == "13:45:00"


@pytest.mark.parametrize(
    "operation, args",
    [
        ("try_format_with_pattern", (None, "yyyy")),
        ("try_format_full_localized", (None,)),
        ("try_parse_date", ("", "yyyy-MM-dd")),
        ("try_parse_date_time", ("2024-01-15", None)),
        ("try_minutes_between", (datetime(2024, 1, 1), None)),
    ],
)
def test_try_operations_report_invalid_arguments(operation, args):
    result = getattr(DateTimeHelper(locale="en_US"), operation)(*args)

    assert not result.ok
    assert isinstance(result.error, InvalidArgument)
    assert result.value is None
