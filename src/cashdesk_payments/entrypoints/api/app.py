"""
Application factory for the payments HTTP API.

Wires settings, the store (SQLAlchemy or in-memory), the clock and the
application services, and registers routers and exception handlers.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from functools import partial

from fastapi import FastAPI

from cashdesk_payments.application.ports import TimeProvider, UnitOfWorkFactory
from cashdesk_payments.application.services import (
    MasterDataService,
    PaymentLifecycleService,
    PaymentQueryService,
)
from cashdesk_payments.config import Settings
from cashdesk_payments.entrypoints.api.problems import add_exception_handlers
from cashdesk_payments.entrypoints.api.routes import (
    cash_desks_router,
    employees_router,
    payments_router,
)
from cashdesk_payments.infrastructure.database import (
    create_db_engine,
    create_session_factory,
    init_db,
)
from cashdesk_payments.infrastructure.in_memory import InMemoryStore
from cashdesk_payments.infrastructure.orm import SqlAlchemyUnitOfWork
from cashdesk_payments.infrastructure.time_provider import SystemTimeProvider
from cashdesk_payments.log_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    uow_factory: UnitOfWorkFactory | None = None,
    time_provider: TimeProvider | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Service configuration; read from the environment if omitted.
        uow_factory: Unit of work factory to use instead of the one derived
            from settings.DATABASE_URL.
        time_provider: Clock to use instead of the system clock.
    """
    settings = settings or Settings()
    engine = None

    if uow_factory is None:
        if settings.uses_in_memory_store:
            uow_factory = InMemoryStore().unit_of_work
        else:
            engine = create_db_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
            session_factory = create_session_factory(engine)
            uow_factory = partial(SqlAlchemyUnitOfWork, session_factory)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s", settings.API_TITLE)
        if engine is not None:
            init_db(engine)
        yield
        if engine is not None:
            engine.dispose()
        logger.info("Stopped %s", settings.API_TITLE)

    app = FastAPI(title=settings.API_TITLE, lifespan=lifespan)
    app.state.settings = settings
    app.state.lifecycle_service = PaymentLifecycleService(
        uow_factory=uow_factory,
        time_provider=time_provider or SystemTimeProvider(),
        payment_date_tolerance=settings.payment_date_tolerance,
    )
    app.state.query_service = PaymentQueryService(uow_factory)
    app.state.master_data_service = MasterDataService(uow_factory)

    app.include_router(payments_router)
    app.include_router(cash_desks_router)
    app.include_router(employees_router)
    add_exception_handlers(app)

    @app.get("/health", tags=["health"])
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


def run() -> None:
    """Console entry point: serve the API with uvicorn."""
    import uvicorn

    settings = Settings()
    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(
        create_app(settings),
        host=settings.SERVICE_HOST,
        port=settings.SERVICE_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
