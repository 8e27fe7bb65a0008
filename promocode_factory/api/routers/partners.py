from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response, status
from sqlalchemy.orm import Session

from promocode_factory.api.deps import get_db, get_limit_manager
import promocode_factory.repositories.partner as partner_repo
from promocode_factory.services.partner import (
    get_partner,
    get_partner_limit,
    list_partner_limits,
)
from promocode_factory.services.partner_limit import LimitManager
from promocode_factory.schemas.partner import (
    Partner,
    PartnerPromoCodeLimit,
    SetPartnerPromoCodeLimitRequest,
)

router = APIRouter(prefix="/partners", tags=["partners"])


@router.get("", response_model=list[Partner])
def get_all_partners(db: Session = Depends(get_db)):
    """
    Get all partners with their promo code limits.
    """
    partners = partner_repo.get_all_partners(db)
    return [Partner.model_validate(partner) for partner in partners]


@router.get("/{partner_id}", response_model=Partner)
def get_partner_by_id(partner_id: UUID, db: Session = Depends(get_db)):
    """
    Get a partner by ID.
    """
    return Partner.model_validate(get_partner(db, partner_id))


@router.get("/{partner_id}/limits", response_model=list[PartnerPromoCodeLimit])
def get_partner_limits(
    partner_id: UUID,
    active: bool | None = Query(
        None, description="Only active (true) or only cancelled (false) limits"
    ),
    db: Session = Depends(get_db),
):
    """
    Get the promo code limits of a partner, oldest first.
    """
    limits = list_partner_limits(db, partner_id, active=active)
    return [PartnerPromoCodeLimit.model_validate(limit) for limit in limits]


@router.get("/{partner_id}/limits/{limit_id}", response_model=PartnerPromoCodeLimit)
def get_partner_limit_by_id(
    partner_id: UUID,
    limit_id: UUID,
    db: Session = Depends(get_db),
):
    """
    Get one promo code limit of a partner.
    """
    return PartnerPromoCodeLimit.model_validate(
        get_partner_limit(db, partner_id, limit_id)
    )


@router.post(
    "/{partner_id}/limits",
    response_model=PartnerPromoCodeLimit,
    status_code=status.HTTP_201_CREATED,
)
def set_partner_promo_code_limit(
    partner_id: UUID,
    request: Request,
    response: Response,
    limit_data: SetPartnerPromoCodeLimitRequest | None = None,
    limit_manager: LimitManager = Depends(get_limit_manager),
):
    """
    Set a new promo code limit for a partner.

    The previous active limit is cancelled and the partner's issued promo
    code counter is reset. A missing body is treated as a missing limit.
    """
    limit_data = limit_data or SetPartnerPromoCodeLimitRequest()
    new_limit = limit_manager.set_limit(
        partner_id,
        limit=limit_data.limit,
        end_date=limit_data.end_date,
    )
    response.headers["Location"] = str(
        request.url_for(
            "get_partner_limit_by_id", partner_id=partner_id, limit_id=new_limit.id
        )
    )
    return PartnerPromoCodeLimit.model_validate(new_limit)


@router.post("/{partner_id}/canceled-limits", status_code=status.HTTP_204_NO_CONTENT)
def cancel_partner_promo_code_limit(
    partner_id: UUID,
    limit_manager: LimitManager = Depends(get_limit_manager),
):
    """
    Cancel the active promo code limit of a partner without setting a new one.
    """
    limit_manager.cancel_limit(partner_id)
