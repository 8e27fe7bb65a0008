from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from promocode_factory.domain.partner_limit_activity import PartnerLimitActivityPolicy


class PartnerPromoCodeLimit(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    partner_id: UUID
    limit: int
    create_date: datetime
    cancel_date: datetime | None = None
    end_date: datetime | None = None

    @field_validator("create_date", "cancel_date", "end_date", mode="after")
    @classmethod
    def as_utc(cls, v: datetime | None) -> datetime | None:
        """Timestamps are stored in UTC; SQLite hands them back without tzinfo."""
        if v is None:
            return None
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)

    @computed_field
    @property
    def is_active(self) -> bool:
        return PartnerLimitActivityPolicy().is_active(cancel_date=self.cancel_date)


class Partner(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    is_active: bool
    number_issued_promo_codes: int
    limits: list[PartnerPromoCodeLimit] = []


class SetPartnerPromoCodeLimitRequest(BaseModel):
    # Taken as-is and validated by LimitManager, so that partner existence
    # and status are always reported before a bad limit.
    limit: Any = Field(None, description="Maximum number of promo codes, an integer greater than 0")
    end_date: datetime | None = Field(None, description="Planned end of the limit period")
