"""Pydantic schemas for schedule request/response serialization"""

import json
import datetime as dt
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

from payment_scheduler.domain.models import ScheduledPayment, ScheduleRequest


class ScheduleRequestSchema(BaseModel):
    """Schedule request in its camelCase wire shape"""

    model_config = ConfigDict(populate_by_name=True)

    # Left as plain values; range checks belong to validate_request
    terms: str = Field("", description="Term type: net | installments")
    amount_in_cents: int = Field(..., alias="amountInCents", description="Total amount in cents")
    fee_percentage: int = Field(..., alias="feePercentage", description="Variable fee rate in percent")
    duration: int = Field(..., description="Days from start date to final charge")
    start_date: Union[dt.date, dt.datetime] = Field(..., alias="startDate")
    currency: str = ""

    def to_request(self) -> ScheduleRequest:
        """Convert to the immutable domain request"""
        return ScheduleRequest(
            term_type=self.terms,
            amount_cents=self.amount_in_cents,
            fee_percent=self.fee_percentage,
            duration_days=self.duration,
            start_date=self.start_date,
            currency=self.currency,
        )


class ScheduledPaymentSchema(BaseModel):
    """Single charge in a payment schedule"""

    model_config = ConfigDict(populate_by_name=True)

    date: Union[dt.date, dt.datetime]
    amount_in_cents: int = Field(..., alias="amountInCents")
    currency: str

    @classmethod
    def from_payment(cls, payment: ScheduledPayment) -> "ScheduledPaymentSchema":
        return cls(date=payment.date, amount_in_cents=payment.amount_cents, currency=payment.currency)


def dump_schedule(payments: List[ScheduledPayment]) -> str:
    """Serialize a schedule as a JSON array of camelCase payment objects"""
    return json.dumps(
        [ScheduledPaymentSchema.from_payment(p).model_dump(mode="json", by_alias=True) for p in payments]
    )
