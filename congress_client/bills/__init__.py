"""Bills API client."""

from congress_client.bills.client import BillsClient
from congress_client.bills.schemas import BillType, CosponsorType

__all__ = [
    "BillsClient",
    "BillType",
    "CosponsorType",
]
