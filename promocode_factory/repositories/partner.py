from uuid import UUID

from sqlalchemy.orm import Session

from promocode_factory.db.models.partner import Partner as PartnerModel
from promocode_factory.db.models.partner_promo_code_limit import (
    PartnerPromoCodeLimit as PartnerPromoCodeLimitModel,
)
from promocode_factory.domain.partner_limit_activity import PartnerLimitActivityPolicy


def get_partner_by_id(
    db: Session, partner_id: UUID, for_update: bool = False
) -> PartnerModel | None:
    """
    Get a partner by ID.

    Args:
        for_update: Lock the partner row until the transaction ends, so
            concurrent limit changes on the same partner are serialized.
            Ignored by SQLite.
    """
    query = db.query(PartnerModel).filter(PartnerModel.id == partner_id)
    if for_update:
        # Reload attributes of a partner already in the session once the row is locked
        query = query.with_for_update().populate_existing()
    return query.first()


def get_all_partners(db: Session) -> list[PartnerModel]:
    """Get all partners."""
    return db.query(PartnerModel).order_by(PartnerModel.name).all()


def update_partner(db: Session, partner: PartnerModel) -> PartnerModel:
    """Persist a partner and its limits. Pure data access - no business logic."""
    db.add(partner)
    db.commit()
    db.refresh(partner)
    return partner


def get_limit_by_id(
    db: Session, partner_id: UUID, limit_id: UUID
) -> PartnerPromoCodeLimitModel | None:
    """Get a limit by ID, only if it belongs to the given partner."""
    return (
        db.query(PartnerPromoCodeLimitModel)
        .filter(
            PartnerPromoCodeLimitModel.id == limit_id,
            PartnerPromoCodeLimitModel.partner_id == partner_id,
        )
        .first()
    )


def get_limits_by_partner_id(
    db: Session, partner_id: UUID, active: bool | None = None
) -> list[PartnerPromoCodeLimitModel]:
    """
    Get the limits of a partner, oldest first.

    Args:
        active: If given, only active (True) or only cancelled (False) limits.
                The "active" definition lives in PartnerLimitActivityPolicy.
    """
    query = db.query(PartnerPromoCodeLimitModel).filter(
        PartnerPromoCodeLimitModel.partner_id == partner_id
    )

    if active is not None:
        predicate = PartnerLimitActivityPolicy().sqlalchemy_active_predicate(
            cancel_col=PartnerPromoCodeLimitModel.cancel_date
        )
        query = query.filter(predicate if active else ~predicate)

    return query.order_by(PartnerPromoCodeLimitModel.create_date).all()
