from uuid import UUID

from sqlalchemy.orm import Session

import promocode_factory.repositories.partner as partner_repo
from promocode_factory.db.models.partner import Partner as PartnerModel
from promocode_factory.db.models.partner_promo_code_limit import (
    PartnerPromoCodeLimit as PartnerPromoCodeLimitModel,
)
from promocode_factory.errors import LimitNotFoundError, PartnerNotFoundError


def get_partner(db: Session, partner_id: UUID) -> PartnerModel:
    """
    Get a partner or fail.

    Raises:
        PartnerNotFoundError: If partner doesn't exist
    """
    partner = partner_repo.get_partner_by_id(db, partner_id)
    if not partner:
        raise PartnerNotFoundError(f"Partner with id {partner_id} not found")
    return partner


def list_partner_limits(
    db: Session, partner_id: UUID, active: bool | None = None
) -> list[PartnerPromoCodeLimitModel]:
    """List a partner's limits, optionally only active or only cancelled ones."""
    get_partner(db, partner_id)
    return partner_repo.get_limits_by_partner_id(db, partner_id, active=active)


def get_partner_limit(
    db: Session, partner_id: UUID, limit_id: UUID
) -> PartnerPromoCodeLimitModel:
    """
    Get one limit of a partner.

    Raises:
        PartnerNotFoundError: If partner doesn't exist
        LimitNotFoundError: If the limit doesn't exist or belongs to another partner
    """
    get_partner(db, partner_id)
    limit = partner_repo.get_limit_by_id(db, partner_id, limit_id)
    if not limit:
        raise LimitNotFoundError(
            f"Limit with id {limit_id} not found for partner {partner_id}"
        )
    return limit
