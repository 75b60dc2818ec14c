import pytest

from utils import common_utils
from utils.common_utils import (format_currency, is_sorted_alphabetically, is_sorted_ascending,
                                is_sorted_descending, is_sorted_reverse_alphabetically, parse_price,
                                retry)


@pytest.mark.unit
class TestPrice:

    def test_parse_price(self):
        assert parse_price("$29.99") == 29.99
        assert parse_price(" $7.99 ") == 7.99

    def test_format_currency(self):
        assert format_currency(3.2) == "$3.20"


@pytest.mark.unit
class TestSorted:

    def test_numbers(self):
        assert is_sorted_ascending([7.99, 9.99, 15.99, 15.99])
        assert not is_sorted_ascending([9.99, 7.99])
        assert is_sorted_descending([49.99, 15.99, 15.99])
        assert is_sorted_ascending([])

    def test_names_ignore_case(self):
        assert is_sorted_alphabetically(["apple", "Banana", "cherry"])
        assert is_sorted_reverse_alphabetically(["Test.allTheThings()", "Sauce Labs Onesie"])
        assert not is_sorted_alphabetically(["b", "A", "c"])


@pytest.mark.unit
class TestRetry:

    @pytest.fixture(autouse=True)
    def no_sleep(self, monkeypatch):
        sleeps = []
        monkeypatch.setattr(common_utils.time, "sleep", sleeps.append)
        return sleeps

    def test_success_after_failures(self, no_sleep):
        attempts = []

        def flaky():
            attempts.append(1)
            if len(attempts) < 3:
                raise RuntimeError("not yet")
            return "ok"

        assert retry(flaky, max_attempts=3, delay=200) == "ok"
        assert no_sleep == [0.2, 0.2]

    def test_last_error_raised(self):
        def always_fail():
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            retry(always_fail, max_attempts=2, delay=0)

    def test_invalid_max_attempts(self):
        with pytest.raises(ValueError):
            retry(lambda: None, max_attempts=0)
