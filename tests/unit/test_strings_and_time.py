"""
Тесты для utils.strings и utils.timefmt
"""

import re
from datetime import datetime

import pytest

from scriptkit.core.errors import InvalidArgumentError
from scriptkit.utils.strings import (
    DEFAULT_ALPHABET,
    capitalize_first,
    count_words,
    is_palindrome,
    pad_left,
    pad_right,
    random_string,
    reverse_string,
    slugify,
    to_camel_case,
    to_kebab_case,
    to_pascal_case,
    to_snake_case,
    to_title_case,
    truncate,
)
from scriptkit.utils.timefmt import (
    days_in_month,
    format_duration,
    is_leap_year,
    seconds_to_hms,
    timestamp,
)

# =============================================================================
# РЕГИСТР
# =============================================================================


class TestCaseConversion:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("playerMaxHealth", "player_max_health"),
            ("PlayerMaxHealth", "player_max_health"),
            ("player-max health", "player_max_health"),
            ("HTTPServer", "http_server"),
            ("level2Boss", "level2_boss"),
        ],
    )
    def test_snake(self, text, expected) -> None:
        assert to_snake_case(text) == expected

    def test_camel_and_pascal(self) -> None:
        assert to_camel_case("player_max_health") == "playerMaxHealth"
        assert to_pascal_case("player_max_health") == "PlayerMaxHealth"
        assert to_pascal_case("HTTPServer") == "HttpServer"

    def test_kebab_and_title(self) -> None:
        assert to_kebab_case("PlayerMaxHealth") == "player-max-health"
        assert to_title_case("hello_world") == "Hello World"

    def test_roundtrip_through_snake(self) -> None:
        assert to_snake_case(to_camel_case("enemy_spawn_rate")) == "enemy_spawn_rate"

    def test_empty_string(self) -> None:
        assert to_snake_case("") == ""
        assert to_camel_case("") == ""

    def test_capitalize_first(self) -> None:
        assert capitalize_first("hello World") == "Hello World"
        assert capitalize_first("") == ""

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            to_snake_case(42)


# =============================================================================
# ПРОЧЕЕ
# =============================================================================


class TestStringHelpers:
    def test_truncate(self) -> None:
        assert truncate("Hello, world", 8) == "Hello..."
        assert truncate("short", 10) == "short"
        assert truncate("abcdef", 2) == ".."
        assert truncate("abcdef", 4, suffix="~") == "abc~"

    def test_reverse_and_palindrome(self) -> None:
        assert reverse_string("abc") == "cba"
        assert is_palindrome("A man, a plan, a canal: Panama")
        assert not is_palindrome("scriptkit")

    def test_count_words(self) -> None:
        assert count_words("  one two\tthree\n") == 3
        assert count_words("") == 0

    def test_slugify(self) -> None:
        assert slugify("  Héllo, World! ") == "hello-world"
        assert slugify("Level 2: The Cave") == "level-2-the-cave"

    def test_random_string_seeded(self) -> None:
        value = random_string(12, seed=5)
        assert value == random_string(12, seed=5)
        assert len(value) == 12
        assert set(value) <= set(DEFAULT_ALPHABET)

    def test_random_string_custom_alphabet(self) -> None:
        assert set(random_string(50, alphabet="01")) <= {"0", "1"}
        assert random_string(0) == ""

    def test_random_string_empty_alphabet(self) -> None:
        with pytest.raises(InvalidArgumentError):
            random_string(5, alphabet="")

    def test_padding(self) -> None:
        assert pad_left("7", 3, "0") == "007"
        assert pad_right("ab", 4) == "ab  "
        assert pad_left("long", 2) == "long"

    def test_padding_fill_single_char(self) -> None:
        with pytest.raises(InvalidArgumentError):
            pad_left("x", 3, "ab")


# =============================================================================
# ВРЕМЯ
# =============================================================================


class TestTimeFormatting:
    def test_timestamp_fixed(self) -> None:
        assert timestamp(datetime(2024, 3, 7, 9, 5, 1)) == "20240307_090501"

    def test_timestamp_now_format(self) -> None:
        assert re.fullmatch(r"\d{8}_\d{6}", timestamp())

    def test_timestamp_rejects_non_datetime(self) -> None:
        with pytest.raises(InvalidArgumentError):
            timestamp("2024-03-07")

    def test_format_duration(self) -> None:
        assert format_duration(0) == "00:00:00"
        assert format_duration(3725) == "01:02:05"
        assert format_duration(90_000.9) == "25:00:00"

    def test_negative_duration(self) -> None:
        with pytest.raises(InvalidArgumentError):
            format_duration(-1)

    def test_seconds_to_hms(self) -> None:
        assert seconds_to_hms(3661) == (1, 1, 1)

    def test_leap_years(self) -> None:
        assert is_leap_year(2000)
        assert is_leap_year(2024)
        assert not is_leap_year(1900)
        assert not is_leap_year(2023)

    def test_days_in_month(self) -> None:
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2023, 12) == 31

    def test_days_in_month_invalid(self) -> None:
        with pytest.raises(InvalidArgumentError):
            days_in_month(2023, 13)
