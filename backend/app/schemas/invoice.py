"""Invoice Form Schemas — validation of submitted invoice forms and the mutation result shape.

Invariants:
    - Only customerId, amount and status are validated; id and date never come from the form
    - amount is a finite decimal > 0 that is worth at least one cent
    - amount never exceeds what the invoices.amount column holds (MAX_INVOICE_AMOUNT_CENTS)
    - Every validation failure maps to one fixed, user-facing message per field,
      except an over-large amount, which names the limit
    - MutationResult is the single return shape of create, update and delete
"""

from collections.abc import Mapping
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.core.currency import format_currency, to_cents
from app.core.domain_types import MAX_INVOICE_AMOUNT_CENTS, InvoiceStatus

MAX_AMOUNT = Decimal(MAX_INVOICE_AMOUNT_CENTS).scaleb(-2)

FORM_FIELDS = ("customerId", "amount", "status")

FIELD_MESSAGES = {
    "customerId": "Please select a customer.",
    "amount": "Please enter an amount greater than $0.",
    "status": "Please select an invoice status.",
}

AMOUNT_TOO_LARGE = (
    f"Please enter an amount no greater than {format_currency(MAX_INVOICE_AMOUNT_CENTS)}."
)


class InvoiceForm(BaseModel):
    """Validated invoice form — field names follow the submitted form keys."""
    model_config = ConfigDict(populate_by_name=True)

    customer_id: str = Field(alias="customerId", min_length=1)
    amount: Decimal = Field(gt=0, le=MAX_AMOUNT, allow_inf_nan=False)
    status: InvoiceStatus

    @field_validator("customer_id", mode="before")
    @classmethod
    def strip_customer_id(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("amount")
    @classmethod
    def at_least_one_cent(cls, v: Decimal) -> Decimal:
        if to_cents(v) < 1:
            raise ValueError("amount rounds to zero cents")
        return v

    @property
    def amount_cents(self) -> int:
        return to_cents(self.amount)


def parse_invoice_form(
    fields: Mapping[str, object],
) -> tuple[InvoiceForm | None, dict[str, list[str]]]:
    """Validate submitted form fields.

    Returns (form, {}) on success or (None, field_errors) on failure, where
    field_errors maps each offending form key to its messages.
    """
    data = {key: fields[key] for key in FORM_FIELDS if fields.get(key) is not None}
    try:
        return InvoiceForm.model_validate(data), {}
    except ValidationError as exc:
        return None, _flatten_errors(exc)


def _flatten_errors(exc: ValidationError) -> dict[str, list[str]]:
    errors: dict[str, list[str]] = {}
    for err in exc.errors():
        key = str(err["loc"][0]) if err["loc"] else "form"
        if key == "amount" and err["type"] == "less_than_equal":
            message = AMOUNT_TOO_LARGE
        else:
            message = FIELD_MESSAGES.get(key, err["msg"])
        if message not in errors.setdefault(key, []):
            errors[key].append(message)
    return errors


class MutationResult(BaseModel):
    """Outcome of a mutation: success (maybe with a redirect) or failure with a message."""
    success: bool
    errors: dict[str, list[str]] = Field(default_factory=dict)
    message: str | None = None
    redirect_to: str | None = None

    @classmethod
    def ok(cls, message: str | None = None, redirect_to: str | None = None) -> "MutationResult":
        return cls(success=True, message=message, redirect_to=redirect_to)

    @classmethod
    def invalid(cls, errors: dict[str, list[str]], message: str) -> "MutationResult":
        return cls(success=False, errors=errors, message=message)

    @classmethod
    def failed(cls, message: str) -> "MutationResult":
        return cls(success=False, message=message)
