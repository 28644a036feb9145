"""
Tests for the field-level validation rules.
Run from project root: python -m pytest tests/test_validation.py -v
"""
import unittest
from datetime import date
from decimal import Decimal

from schemas.application import Application
from services.step_plan import visible_fields
from services.validation import (
    MSG_INVALID_EMAIL,
    MSG_INVALID_NUMBER,
    MSG_INVALID_OPTION,
    MSG_INVALID_PHONE,
    parse_money,
    validate,
    validate_field,
)
from tests.factories import complete_values

REQUIRED_FIELDS = [
    "email",
    "full_name",
    "phone_number",
    "credit_score",
    "property_address",
    "property_type",
    "purchase_price",
    "consent_transactional",
]

MONEY_FIELDS = ["purchase_price", "down_payment", "additional_reserves"]


class TestValidateRecord(unittest.TestCase):
    def test_complete_application_is_valid(self):
        self.assertEqual(validate(complete_values()), {})

    def test_empty_application_flags_exactly_the_required_fields(self):
        errors = validate(Application())
        self.assertEqual(set(errors), set(REQUIRED_FIELDS))

    def test_each_required_field_blank(self):
        for name in REQUIRED_FIELDS:
            with self.subTest(field=name):
                values = complete_values()
                values[name] = False if name == "consent_transactional" else ""
                errors = validate(values)
                self.assertEqual(list(errors), [name])

    def test_whitespace_counts_as_blank(self):
        values = complete_values()
        values["property_address"] = "   "
        self.assertIn("property_address", validate(values))

    def test_consent_message(self):
        values = complete_values()
        values["consent_transactional"] = False
        self.assertEqual(
            validate(values)["consent_transactional"],
            "You must consent to receive transactional messages",
        )

    def test_does_not_mutate_values(self):
        values = complete_values()
        values["email"] = "nope"
        snapshot = dict(values)
        validate(values)
        self.assertEqual(values, snapshot)

    def test_short_name(self):
        values = complete_values()
        values["full_name"] = "J"
        self.assertIn("at least 2 characters", validate(values)["full_name"])

    def test_restricts_fields_when_given(self):
        fields = visible_fields(1, {})
        errors = validate(Application(), fields)
        self.assertEqual(set(errors), {"full_name", "email", "phone_number", "credit_score"})


class TestEmail(unittest.TestCase):
    def test_malformed_emails_rejected(self):
        for bad in ["janegmail.com", "jane@", "jane@gmail", "@gmail.com", "jane doe@gmail.com"]:
            with self.subTest(email=bad):
                values = {**complete_values(), "email": bad}
                self.assertEqual(validate(values).get("email"), MSG_INVALID_EMAIL)

    def test_plausible_emails_accepted(self):
        for good in ["jane@gmail.com", "j.doe+loans@lenders.co", "INVESTOR@Realty-Group.org"]:
            with self.subTest(email=good):
                values = {**complete_values(), "email": good}
                self.assertNotIn("email", validate(values))


class TestPhone(unittest.TestCase):
    def test_accepted_formats(self):
        for good in ["5551234567", "555-123-4567", "(555) 123-4567", "+1 555.123.4567", "+44 555 123 4567"]:
            with self.subTest(phone=good):
                self.assertIsNone(validate_field("phone_number", {"phone_number": good}))

    def test_rejected_formats(self):
        for bad in ["12345", "555-1234", "phone", "555-123-45678"]:
            with self.subTest(phone=bad):
                self.assertEqual(validate_field("phone_number", {"phone_number": bad}), MSG_INVALID_PHONE)


class TestMoney(unittest.TestCase):
    def test_parse_money_strips_thousands_separators(self):
        self.assertEqual(parse_money("1,234,567"), 1234567)
        self.assertEqual(parse_money("2500.50"), Decimal("2500.50"))

    def test_parse_money_rejects_garbage(self):
        for bad in ["abc", "", "   ", None, "NaN", "Infinity", "$500,000"]:
            with self.subTest(text=bad):
                self.assertIsNone(parse_money(bad))

    def test_money_fields(self):
        for name in MONEY_FIELDS:
            with self.subTest(field=name):
                values = {**complete_values(), name: "1,234,567"}
                self.assertNotIn(name, validate(values))
                values[name] = "abc"
                self.assertEqual(validate(values)[name], MSG_INVALID_NUMBER)

    def test_optional_money_may_be_empty(self):
        values = {**complete_values(), "down_payment": "", "additional_reserves": ""}
        self.assertEqual(validate(values), {})


class TestConditionalAndOptions(unittest.TestCase):
    def test_rehab_amount_validated_only_when_flag_set(self):
        values = {**complete_values(), "needs_rehab_funding": True, "rehab_funding_needed": "abc"}
        self.assertEqual(validate(values)["rehab_funding_needed"], MSG_INVALID_NUMBER)

        values["needs_rehab_funding"] = False
        self.assertNotIn("rehab_funding_needed", validate(values))

    def test_option_lists_enforced(self):
        values = {**complete_values(), "credit_score": "850+", "loan_purpose": "Lease"}
        errors = validate(values)
        self.assertEqual(errors["credit_score"], MSG_INVALID_OPTION)
        self.assertEqual(errors["loan_purpose"], MSG_INVALID_OPTION)

    def test_closing_date(self):
        self.assertIsNone(validate_field("closing_date", {"closing_date": None}))
        self.assertIsNone(validate_field("closing_date", {"closing_date": date(2030, 1, 15)}))
        self.assertIsNotNone(validate_field("closing_date", {"closing_date": "next tuesday"}))

    def test_unknown_field(self):
        with self.assertRaises(KeyError):
            validate_field("ssn", {})


class TestRadioFields(unittest.TestCase):
    def test_blank_radio_is_required(self):
        for name in ["loan_purpose", "investment_strategy", "project_type"]:
            with self.subTest(field=name):
                values = {**complete_values(), name: ""}
                self.assertEqual(list(validate(values)), [name])
                self.assertIn("is required", validate(values)[name])
