from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import TypeVar

L = TypeVar("L")


@dataclass(frozen=True, slots=True)
class PartnerLimitActivityPolicy:
    """Defines what it means for a partner's promo code limit to be active.

    Semantics (intentionally centralized):
    - A limit is active while cancel_date is None
    - Setting cancel_date is the only way a limit stops being active

    end_date is informational and does not take part in this rule.
    """

    def is_active(self, *, cancel_date: datetime | None) -> bool:
        return cancel_date is None

    def active_limits(self, limits: Iterable[L]) -> list[L]:
        """Return every active limit, in the order given.

        More than one result means the partner state already violates the
        single-active-limit invariant; callers cancel all of them.
        """
        return [limit for limit in limits if self.is_active(cancel_date=limit.cancel_date)]

    def sqlalchemy_active_predicate(self, *, cancel_col):
        """Build a SQLAlchemy predicate implementing the active rule."""
        return cancel_col.is_(None)
