"""MutationService — validation short-circuits, store failures and invalidation.

Invariants:
    - Invalid forms never reach the store and carry field-keyed errors
    - Store failures return a generic message and never invalidate
    - Successful create/update redirect to the invoices view; delete does not
"""

import datetime

import pytest

from app.core.domain_types import INVOICES_PATH
from app.services.mutation_service import MutationService
from tests.services.seed_data import EVIL, INVOICES, LEE


def _form(**overrides):
    fields = {"customerId": EVIL, "amount": "12.34", "status": "pending"}
    fields.update(overrides)
    return fields


@pytest.fixture
def service(fake_store, invalidator):
    return MutationService(fake_store, invalidator)


async def test_create_inserts_cents_and_today(service, fake_store, invalidator):
    result = await service.create_invoice(_form())

    assert result.success is True
    assert result.redirect_to == INVOICES_PATH
    assert invalidator.paths == [INVOICES_PATH]
    method, (values,) = fake_store.calls[-1]
    assert method == "insert_invoice"
    assert values["amount"] == 1234
    assert values["status"] == "pending"
    assert values["customer_id"] == EVIL
    assert values["date"] == datetime.datetime.now(datetime.timezone.utc).date()


async def test_create_rounds_half_up_to_cents(service, fake_store):
    await service.create_invoice(_form(amount="0.125"))
    _, (values,) = fake_store.calls[-1]
    assert values["amount"] == 13


@pytest.mark.parametrize("amount", ["0", "-5", "0.001", "", "abc", "nan", "inf"])
async def test_create_rejects_non_positive_amount(service, fake_store, invalidator, amount):
    result = await service.create_invoice(_form(amount=amount))

    assert result.success is False
    assert result.errors["amount"]
    assert result.message == "Missing Fields. Failed to Create Invoice."
    assert fake_store.writes() == []
    assert invalidator.paths == []


@pytest.mark.parametrize("amount", [
    "1e30", "99999999999999999999999999999", "25000000", "21474836.475",
])
async def test_create_rejects_amount_beyond_column_range(
    service, fake_store, invalidator, amount,
):
    result = await service.create_invoice(_form(amount=amount))

    assert result.success is False
    assert result.errors == {
        "amount": ["Please enter an amount no greater than $21,474,836.47."],
    }
    assert fake_store.writes() == []
    assert invalidator.paths == []


async def test_create_accepts_largest_storable_amount(service, fake_store):
    result = await service.create_invoice(_form(amount="21474836.47"))

    assert result.success is True
    _, (values,) = fake_store.calls[-1]
    assert values["amount"] == 2**31 - 1


async def test_update_rejects_huge_amount(service, fake_store):
    result = await service.update_invoice(INVOICES[0]["id"], _form(amount="1e30"))

    assert result.success is False
    assert result.errors["amount"]
    assert result.message == "Missing Fields. Failed to Update Invoice."
    assert fake_store.writes() == []


async def test_create_missing_customer_has_no_redirect(service, fake_store):
    fields = _form()
    del fields["customerId"]
    result = await service.create_invoice(fields)

    assert result.errors["customerId"] == ["Please select a customer."]
    assert result.redirect_to is None
    assert fake_store.writes() == []


async def test_create_reports_every_invalid_field(service):
    result = await service.create_invoice({"customerId": "  ", "status": "overdue"})
    assert set(result.errors) == {"customerId", "amount", "status"}
    assert result.errors["status"] == ["Please select an invoice status."]


async def test_create_store_failure_returns_generic_message(service, fake_store, invalidator):
    fake_store.fail_on("insert_invoice")
    result = await service.create_invoice(_form())

    assert result.success is False
    assert result.message == "Database Error: Failed to Create Invoice."
    assert result.errors == {}
    assert result.redirect_to is None
    assert invalidator.paths == []


async def test_update_writes_validated_fields_only(service, fake_store, invalidator):
    target = INVOICES[0]["id"]
    result = await service.update_invoice(
        target, _form(customerId=LEE, amount="99", status="paid", date="1999-01-01"),
    )

    assert result.success is True
    assert result.redirect_to == INVOICES_PATH
    method, (invoice_id, values) = fake_store.calls[-1]
    assert (method, invoice_id) == ("update_invoice", target)
    assert values == {"customer_id": LEE, "amount": 9900, "status": "paid"}
    assert invalidator.paths == [INVOICES_PATH]


async def test_update_invalid_form(service, fake_store):
    result = await service.update_invoice(INVOICES[0]["id"], _form(status=""))
    assert result.message == "Missing Fields. Failed to Update Invoice."
    assert "status" in result.errors
    assert fake_store.writes() == []


async def test_update_store_failure(service, fake_store, invalidator):
    fake_store.fail_on("update_invoice")
    result = await service.update_invoice(INVOICES[0]["id"], _form())
    assert result.message == "Database Error: Failed to Update Invoice."
    assert invalidator.paths == []


async def test_delete_removes_and_invalidates(service, fake_store, invalidator):
    target = INVOICES[0]["id"]
    result = await service.delete_invoice(target)

    assert result.success is True
    assert result.message == "Deleted Invoice."
    assert result.redirect_to is None
    assert all(i["id"] != target for i in fake_store.invoices)
    assert invalidator.paths == [INVOICES_PATH]


async def test_delete_store_failure_returns_result(service, fake_store, invalidator):
    fake_store.fail_on("delete_invoice")
    result = await service.delete_invoice(INVOICES[0]["id"])

    assert result.success is False
    assert result.message == "Database Error: Failed to Delete Invoice."
    assert invalidator.paths == []


async def test_create_against_sql_store(seeded_sql_store, invalidator):
    service = MutationService(seeded_sql_store, invalidator)
    result = await service.create_invoice(_form(amount="1.5", status="paid"))

    assert result.success is True
    assert await seeded_sql_store.count_invoices() == len(INVOICES) + 1
    assert await seeded_sql_store.sum_amounts("paid") == 56785 + 150


async def test_create_with_malformed_customer_against_sql_store(seeded_sql_store, invalidator):
    service = MutationService(seeded_sql_store, invalidator)
    result = await service.create_invoice(_form(customerId="not-a-uuid"))

    assert result.message == "Database Error: Failed to Create Invoice."
    assert await seeded_sql_store.count_invoices() == len(INVOICES)
