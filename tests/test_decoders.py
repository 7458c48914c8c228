"""Tests for the normalized value decoders."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from docai_parser.normalization import (
    DateValue,
    MoneyValue,
    NormalizedValue,
    TimeValue,
    decode_date,
    decode_money,
    decode_text,
    decode_time,
)


class TestDecodeMoney:

    def test_units_and_nanos(self):
        assert decode_money(MoneyValue(units="162", nanos=440000000)) == Decimal("162.44")

    def test_nanos_always_fill_nine_digits(self):
        amount = decode_money(MoneyValue(units="1", nanos=5))
        assert amount == Decimal("1.000000005")
        assert amount.as_tuple().exponent == -9

    def test_missing_nanos_defaults_to_zero(self):
        assert decode_money(MoneyValue(units="42")) == Decimal("42")

    def test_missing_units_defaults_to_zero(self):
        assert decode_money(MoneyValue(nanos=990000000)) == Decimal("0.99")

    def test_integer_units(self):
        assert decode_money(MoneyValue(units=7, nanos=250000000)) == Decimal("7.25")

    def test_result_is_decimal_not_float(self):
        assert isinstance(decode_money(MoneyValue(units="0", nanos=100000000)), Decimal)

    def test_negative_amount(self):
        assert decode_money(MoneyValue(units="-1", nanos=-500000000)) == Decimal("-1.5")

    def test_negative_fraction_only(self):
        assert decode_money(MoneyValue(units="0", nanos=-250000000)) == Decimal("-0.25")

    @pytest.mark.parametrize("units, nanos", [
        ("abc", 0),
        ("1.5", 0),
        ("", 0),
        ("1", "many"),
        ("1", 1_000_000_000),
        ("1", -500000000),
        ("-1", 500000000),
        (True, 0),
        (["1"], 0),
        ("1" * 5000, -1),
    ])
    def test_invalid_payload_is_none(self, units, nanos):
        assert decode_money(MoneyValue(units=units, nanos=nanos)) is None

    def test_missing_payload_is_none(self):
        assert decode_money(None) is None


class TestDecodeDate:

    def test_valid_date(self):
        assert decode_date(DateValue(year=2024, month=11, day=27)) == date(2024, 11, 27)

    @pytest.mark.parametrize("year, month, day", [
        (2024, 13, 1),
        (2024, 4, 31),
        (2023, 2, 29),
        (2024, 0, 10),
        (10**20, 1, 1),
    ])
    def test_invalid_calendar_combination_is_none(self, year, month, day):
        assert decode_date(DateValue(year=year, month=month, day=day)) is None

    @pytest.mark.parametrize("value", [
        DateValue(month=11, day=27),
        DateValue(year=2024, day=27),
        DateValue(year=2024, month=11),
        DateValue(year="twenty", month=11, day=27),
        None,
    ])
    def test_missing_or_malformed_fields_are_none(self, value):
        assert decode_date(value) is None


class TestDecodeTime:

    def test_anchored_to_base_date(self):
        result = decode_time(TimeValue(hours=10, minutes=5), date(2024, 11, 27))
        assert result == datetime(2024, 11, 27, 10, 5, 0)

    def test_nanos_become_microseconds(self):
        result = decode_time(TimeValue(hours=1, minutes=2, seconds=3, nanos=500000000), date(2024, 1, 1))
        assert result.microsecond == 500000

    def test_defaults_to_today(self):
        result = decode_time(TimeValue(hours=8))
        assert result.date() == date.today()
        assert (result.hour, result.minute, result.second) == (8, 0, 0)

    def test_empty_payload_is_midnight(self):
        assert decode_time(TimeValue(), date(2024, 1, 1)) == datetime(2024, 1, 1)

    @pytest.mark.parametrize("value", [
        TimeValue(hours=25),
        TimeValue(minutes=61),
        TimeValue(hours="noon"),
        TimeValue(nanos=-1),
        TimeValue(hours=10**20),
        None,
    ])
    def test_invalid_payload_is_none(self, value):
        assert decode_time(value, date(2024, 1, 1)) is None


class TestDecodeText:

    def test_prefers_normalized_text(self):
        assert decode_text("Trader Joe's", "TRADER JOE'S") == "Trader Joe's"

    def test_falls_back_to_mention_text(self):
        assert decode_text(None, "VISA") == "VISA"

    def test_empty_normalized_text_is_kept(self):
        assert decode_text("", "VISA") == ""

    def test_nothing_is_none(self):
        assert decode_text(None, None) is None


class TestNormalizedValue:

    def test_decodes_each_payload_once(self):
        value = NormalizedValue.from_dict({
            "text": "162.44",
            "moneyValue": {"currencyCode": "USD", "units": "162", "nanos": 440000000},
        })
        assert value.money == MoneyValue(units="162", nanos=440000000, currency_code="USD")
        assert value.date is None
        assert value.text == "162.44"

    def test_clock_prefers_datetime_value(self):
        value = NormalizedValue.from_dict({
            "datetimeValue": {"hours": 10},
            "timeValue": {"hours": 11},
        })
        assert value.clock.hours == 10

    def test_clock_uses_time_value(self):
        value = NormalizedValue.from_dict({"timeValue": {"hours": 11}})
        assert value.clock.hours == 11

    @pytest.mark.parametrize("raw", [None, "162.44", ["x"]])
    def test_non_mapping_is_none(self, raw):
        assert NormalizedValue.from_dict(raw) is None

    def test_wrong_payload_shape_is_dropped(self):
        value = NormalizedValue.from_dict({"moneyValue": "162.44"})
        assert value.money is None
