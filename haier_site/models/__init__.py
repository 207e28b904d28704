"""Site models"""

from haier_site.models.base_models import HealthResponse
from haier_site.models.contact import ContactInfo, MailReceipt, OutboundMessage
from haier_site.models.page import PageData

__all__ = [
    "HealthResponse",
    "ContactInfo",
    "MailReceipt",
    "OutboundMessage",
    "PageData",
]
