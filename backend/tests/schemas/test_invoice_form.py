"""Tests for invoice form validation — field errors and cent conversion."""

from decimal import Decimal

from app.core.domain_types import InvoiceStatus
from app.schemas.invoice import (
    AMOUNT_TOO_LARGE, FIELD_MESSAGES, MutationResult, parse_invoice_form,
)


def test_valid_form_parses():
    form, errors = parse_invoice_form(
        {"customerId": " abc ", "amount": "42.10", "status": "paid", "id": "ignored"},
    )
    assert errors == {}
    assert form.customer_id == "abc"
    assert form.amount == Decimal("42.10")
    assert form.amount_cents == 4210
    assert form.status is InvoiceStatus.PAID


def test_missing_fields_report_fixed_messages():
    form, errors = parse_invoice_form({})
    assert form is None
    assert errors == {key: [message] for key, message in FIELD_MESSAGES.items()}


def test_empty_amount_is_an_amount_error():
    _, errors = parse_invoice_form({"customerId": "c", "amount": "", "status": "paid"})
    assert list(errors) == ["amount"]


def test_sub_cent_amount_is_rejected():
    _, errors = parse_invoice_form({"customerId": "c", "amount": "0.004", "status": "paid"})
    assert errors["amount"] == [FIELD_MESSAGES["amount"]]


def test_amount_above_column_limit_names_the_limit():
    _, errors = parse_invoice_form({"customerId": "c", "amount": "1e30", "status": "paid"})
    assert errors == {"amount": [AMOUNT_TOO_LARGE]}
    assert AMOUNT_TOO_LARGE.endswith("$21,474,836.47.")


def test_unknown_status_is_rejected():
    _, errors = parse_invoice_form({"customerId": "c", "amount": "1", "status": "void"})
    assert errors == {"status": [FIELD_MESSAGES["status"]]}


def test_mutation_result_variants():
    assert MutationResult.ok(redirect_to="/x").success is True
    failed = MutationResult.failed("boom")
    assert (failed.success, failed.errors, failed.redirect_to) == (False, {}, None)
