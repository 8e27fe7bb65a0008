import logging
import uuid
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from promocode_factory.db.models.partner import Partner as PartnerModel
from promocode_factory.db.models.partner_promo_code_limit import (
    PartnerPromoCodeLimit as PartnerPromoCodeLimitModel,
)
from promocode_factory.domain.partner_limit_activity import PartnerLimitActivityPolicy
from promocode_factory.errors import (
    LIMIT_TOO_LARGE,
    MAX_LIMIT,
    InvalidLimitError,
    PartnerInactiveError,
    PartnerNotFoundError,
)

logger = logging.getLogger(__name__)

PartnerLookup = Callable[[UUID], PartnerModel | None]
PartnerUpdate = Callable[[PartnerModel], PartnerModel]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _is_int(value: Any) -> bool:
    # bool is an int subclass, but true/false is not a limit
    return isinstance(value, int) and not isinstance(value, bool)


def _is_valid_limit(value: Any) -> bool:
    return _is_int(value) and 0 < value <= MAX_LIMIT


class LimitManager:
    """Sets and cancels promo code issuance limits of partners.

    The manager never touches the database itself. It is given two
    capabilities: ``get_partner_by_id`` resolves a partner (or returns None)
    and ``update_partner`` persists it. Every operation performs exactly one
    lookup and, only when it succeeds, exactly one update. Errors raised by
    ``update_partner`` propagate unchanged.
    """

    def __init__(
        self,
        get_partner_by_id: PartnerLookup,
        update_partner: PartnerUpdate,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._get_partner_by_id = get_partner_by_id
        self._update_partner = update_partner
        self._clock = clock
        self._policy = PartnerLimitActivityPolicy()

    def set_limit(
        self,
        partner_id: UUID,
        limit: Any,
        end_date: datetime | None = None,
    ) -> PartnerPromoCodeLimitModel:
        """
        Replace the partner's active limit with a new one.

        - Validates partner exists
        - Validates partner is active
        - Validates limit is an integer between 1 and MAX_LIMIT
        - Cancels every active limit, adds the new one and resets the
          issued promo code counter

        Nothing is mutated unless all checks pass.

        Raises:
            PartnerNotFoundError: If partner doesn't exist
            PartnerInactiveError: If partner is deactivated
            InvalidLimitError: If limit is missing, not an integer, not greater
                than 0 or greater than MAX_LIMIT
        """
        partner = self._get_active_partner(partner_id)

        if not _is_valid_limit(limit):
            logger.warning(
                "Rejected promo code limit %r for partner %s", limit, partner_id
            )
            if _is_int(limit) and limit > MAX_LIMIT:
                raise InvalidLimitError(LIMIT_TOO_LARGE)
            raise InvalidLimitError()

        now = self._clock()
        cancelled = self._cancel_active_limits(partner, now)

        new_limit = PartnerPromoCodeLimitModel(
            id=uuid.uuid4(),
            partner_id=partner.id,
            limit=limit,
            create_date=now,
            cancel_date=None,
            end_date=end_date,
        )
        partner.limits.append(new_limit)
        partner.number_issued_promo_codes = 0

        self._update_partner(partner)
        logger.info(
            "Set promo code limit %s (%d) for partner %s, cancelled %d previous limit(s)",
            new_limit.id,
            limit,
            partner_id,
            len(cancelled),
        )
        return new_limit

    def cancel_limit(self, partner_id: UUID) -> list[PartnerPromoCodeLimitModel]:
        """
        Cancel the partner's active limit without setting a new one.

        The issued promo code counter is left as is. Returns the limits that
        were cancelled, empty if the partner had no active limit.

        Raises:
            PartnerNotFoundError: If partner doesn't exist
            PartnerInactiveError: If partner is deactivated
        """
        partner = self._get_active_partner(partner_id)

        cancelled = self._cancel_active_limits(partner, self._clock())
        self._update_partner(partner)
        logger.info(
            "Cancelled %d promo code limit(s) for partner %s", len(cancelled), partner_id
        )
        return cancelled

    def _get_active_partner(self, partner_id: UUID) -> PartnerModel:
        partner = self._get_partner_by_id(partner_id)
        if partner is None:
            raise PartnerNotFoundError(f"Partner with id {partner_id} not found")

        if not partner.is_active:
            logger.warning("Partner %s is inactive, limit change rejected", partner_id)
            raise PartnerInactiveError(f"Partner with id {partner_id} is not active")

        return partner

    def _cancel_active_limits(
        self, partner: PartnerModel, now: datetime
    ) -> list[PartnerPromoCodeLimitModel]:
        active = self._policy.active_limits(partner.limits)
        for active_limit in active:
            active_limit.cancel_date = now
        return active
