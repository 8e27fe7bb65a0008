from promocode_factory.db.models.partner import Partner
from promocode_factory.db.models.partner_promo_code_limit import PartnerPromoCodeLimit

__all__ = ["Partner", "PartnerPromoCodeLimit"]
