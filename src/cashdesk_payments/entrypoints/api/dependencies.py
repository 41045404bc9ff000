from fastapi import Request

from cashdesk_payments.application.services import (
    MasterDataService,
    PaymentLifecycleService,
    PaymentQueryService,
)


def get_lifecycle_service(request: Request) -> PaymentLifecycleService:
    return request.app.state.lifecycle_service


def get_query_service(request: Request) -> PaymentQueryService:
    return request.app.state.query_service


def get_master_data_service(request: Request) -> MasterDataService:
    return request.app.state.master_data_service
