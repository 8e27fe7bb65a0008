import uuid

from sqlalchemy import Column, Integer, Boolean, String, Uuid
from sqlalchemy.orm import relationship

from promocode_factory.db.base import Base


class Partner(Base):
    __tablename__ = "partners"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    number_issued_promo_codes = Column(Integer, nullable=False, default=0)

    # Oldest first; the most recent limit is the last element
    limits = relationship(
        "PartnerPromoCodeLimit",
        back_populates="partner",
        cascade="all, delete-orphan",
        order_by="PartnerPromoCodeLimit.create_date",
    )
