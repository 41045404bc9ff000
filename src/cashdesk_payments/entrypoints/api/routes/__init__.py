from cashdesk_payments.entrypoints.api.routes.cash_desks import router as cash_desks_router
from cashdesk_payments.entrypoints.api.routes.employees import router as employees_router
from cashdesk_payments.entrypoints.api.routes.payments import router as payments_router

__all__ = ["cash_desks_router", "employees_router", "payments_router"]
