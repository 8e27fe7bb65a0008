from functools import partial

from fastapi import Depends
from sqlalchemy.orm import Session

import promocode_factory.repositories.partner as partner_repo
from promocode_factory.db.base import SessionLocal
from promocode_factory.services.partner_limit import LimitManager


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_limit_manager(db: Session = Depends(get_db)) -> LimitManager:
    """Build a LimitManager bound to the request's database session.

    The partner row is locked on lookup so concurrent limit changes for the
    same partner are applied one after another.
    """
    return LimitManager(
        get_partner_by_id=partial(partner_repo.get_partner_by_id, db, for_update=True),
        update_partner=partial(partner_repo.update_partner, db),
    )
