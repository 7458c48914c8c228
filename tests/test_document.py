"""Tests for the Document model and its convenience accessors."""

import json
from datetime import date, datetime
from decimal import Decimal

from conftest import money
from docai_parser.models import Document, Entity, EntityType, LineItem


def make_document(*records):
    return Document(entities=tuple(Entity.from_dict(r) for r in records))


class TestLookups:

    def test_find_entity_returns_first_match(self):
        document = make_document(
            {"type": "supplier_name", "mentionText": "FIRST"},
            {"type": "supplier_name", "mentionText": "SECOND"},
        )
        assert document.find_entity("supplier_name").mention_text == "FIRST"

    def test_find_entity_accepts_enum(self):
        document = make_document({"type": "currency", "mentionText": "$"})
        assert document.find_entity(EntityType.CURRENCY).mention_text == "$"

    def test_find_entity_miss_is_none(self):
        assert make_document().find_entity("non_existent_type") is None

    def test_find_entities_in_source_order(self):
        document = make_document(
            {"type": "payment_type", "mentionText": "VISA"},
            {"type": "currency", "mentionText": "$"},
            {"type": "payment_type", "mentionText": "CASH"},
        )
        found = document.find_entities("payment_type")
        assert [e.mention_text for e in found] == ["VISA", "CASH"]

    def test_find_entities_miss_is_empty_list(self):
        assert make_document().find_entities("non_existent_type") == []

    def test_lookups_are_repeatable(self):
        document = make_document({"type": "currency", "mentionText": "$"})
        assert document.find_entity("currency") == document.find_entity("currency")
        assert document.find_entities("currency") == document.find_entities("currency")


class TestConvenienceAccessors:

    def test_empty_document_has_no_values(self):
        document = Document()

        assert document.supplier_name is None
        assert document.supplier_address is None
        assert document.receipt_date is None
        assert document.purchase_time is None
        assert document.total_amount is None
        assert document.currency is None
        assert document.payment_type is None
        assert document.line_items == ()

    def test_supplier_name_and_total(self):
        document = make_document(
            {"type": "supplier_name", "mentionText": "TRADER JOE'S",
             "normalizedValue": {"text": "Trader Joe's"}},
            {"type": "total_amount", "normalizedValue": money("162", 440000000)},
        )

        assert document.supplier_name == "Trader Joe's"
        assert document.total_amount == Decimal("162.44")
        assert len(document.line_items) == 0

    def test_purchase_time_uses_receipt_date(self):
        document = make_document(
            {"type": "receipt_date",
             "normalizedValue": {"dateValue": {"year": 2024, "month": 11, "day": 27}}},
            {"type": "purchase_time",
             "normalizedValue": {"datetimeValue": {"hours": 10, "minutes": 5}}},
        )
        assert document.purchase_time == datetime(2024, 11, 27, 10, 5)

    def test_purchase_time_without_receipt_date_uses_today(self):
        document = make_document(
            {"type": "purchase_time", "normalizedValue": {"timeValue": {"hours": 9}}},
        )
        assert document.purchase_time.date() == date.today()
        assert document.purchase_time.hour == 9

    def test_purchase_time_with_invalid_receipt_date_uses_today(self):
        document = make_document(
            {"type": "receipt_date",
             "normalizedValue": {"dateValue": {"year": 2024, "month": 2, "day": 30}}},
            {"type": "purchase_time", "normalizedValue": {"timeValue": {"hours": 9}}},
        )
        assert document.receipt_date is None
        assert document.purchase_time.date() == date.today()

    def test_out_of_range_values_are_none(self):
        document = make_document(
            {"type": "receipt_date",
             "normalizedValue": {"dateValue": {"year": 10**20, "month": 1, "day": 1}}},
            {"type": "purchase_time", "normalizedValue": {"timeValue": {"hours": 10**20}}},
            {"type": "total_amount", "normalizedValue": money("1" * 5000, -1)},
            {"type": "supplier_name", "mentionText": "ACME"},
        )
        assert document.receipt_date is None
        assert document.purchase_time is None
        assert document.total_amount is None
        assert document.supplier_name == "ACME"

    def test_amount_accessors(self):
        document = make_document(
            {"type": "total_tax_amount", "normalizedValue": money("1", 170000000)},
            {"type": "net_amount", "normalizedValue": money("161", 270000000)},
        )
        assert document.total_tax_amount == Decimal("1.17")
        assert document.net_amount == Decimal("161.27")

    def test_payment_accessors(self):
        document = make_document(
            {"type": "payment_type", "mentionText": "VISA"},
            {"type": "credit_card_last_four_digits", "mentionText": "7268"},
            {"type": "payment_authorization_id", "mentionText": "054561"},
        )
        assert document.payment_type == "VISA"
        assert document.credit_card_last_four_digits == "7268"
        assert document.payment_authorization_id == "054561"


class TestCurrency:

    def test_currency_entity_normalized_text(self):
        document = make_document(
            {"type": "currency", "mentionText": "$", "normalizedValue": {"text": "USD"}},
        )
        assert document.currency == "USD"

    def test_currency_entity_mention_text(self):
        document = make_document({"type": "currency", "mentionText": "$"})
        assert document.currency == "$"

    def test_inferred_from_total_amount(self):
        document = make_document(
            {"type": "total_amount", "normalizedValue": money("162", 440000000, "USD")},
        )
        assert document.currency == "USD"

    def test_currency_entity_wins_over_total(self):
        document = make_document(
            {"type": "total_amount", "normalizedValue": money("10", 0, "USD")},
            {"type": "currency", "normalizedValue": {"text": "CAD"}},
        )
        assert document.currency == "CAD"

    def test_no_source_is_none(self):
        document = make_document(
            {"type": "total_amount", "normalizedValue": money("10", 0)},
        )
        assert document.currency is None


class TestExport:

    def test_to_dict_renders_typed_values(self):
        document = Document(
            entities=(
                Entity.from_dict({"type": "total_amount", "normalizedValue": money("162", 440000000)}),
                Entity.from_dict({"type": "receipt_date",
                                  "normalizedValue": {"dateValue": {"year": 2024, "month": 11, "day": 27}}}),
            ),
            line_items=(LineItem(description="EGGS", amount=Decimal("3.49")),),
        )
        data = document.to_dict()

        assert data["total_amount"] == "162.44"
        assert data["receipt_date"] == "2024-11-27"
        assert data["supplier_name"] is None
        assert data["line_items"] == [{
            "description": "EGGS", "quantity": None, "unit": None,
            "unit_price": None, "amount": "3.49", "product_code": None,
        }]
        assert data["entity_count"] == 2
        assert data["issues"] == []

    def test_to_json_round_trips_through_json(self):
        document = make_document({"type": "supplier_name", "mentionText": "CAFÉ"})
        assert json.loads(document.to_json())["supplier_name"] == "CAFÉ"

    def test_missing_fields(self):
        document = make_document({"type": "supplier_name", "mentionText": "ACME"})
        assert "supplier_name" not in document.missing_fields
        assert "total_amount" in document.missing_fields
