import uuid

from sqlalchemy import Column, Integer, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from promocode_factory.db.base import Base


class PartnerPromoCodeLimit(Base):
    __tablename__ = "partner_promo_code_limits"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    partner_id = Column(Uuid, ForeignKey("partners.id"), nullable=False, index=True)
    limit = Column(Integer, nullable=False)
    create_date = Column(DateTime(timezone=True), nullable=False)
    cancel_date = Column(DateTime(timezone=True), nullable=True)
    end_date = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    partner = relationship("Partner", back_populates="limits")
