"""Application services - the single entry point for every operation."""

from cashdesk_payments.application.services.master_data import MasterDataService
from cashdesk_payments.application.services.payment_lifecycle import PaymentLifecycleService
from cashdesk_payments.application.services.payment_queries import PaymentQueryService

__all__ = [
    "MasterDataService",
    "PaymentLifecycleService",
    "PaymentQueryService",
]
