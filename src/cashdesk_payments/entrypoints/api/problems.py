"""Problem-details (RFC 7807) responses and exception handlers."""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cashdesk_payments.application.result import Failure

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"


def problem_response(
    request: Request,
    status_code: int,
    detail: str,
    title: str | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        media_type=PROBLEM_MEDIA_TYPE,
        content={
            "type": "about:blank",
            "title": title or HTTPStatus(status_code).phrase,
            "status": int(status_code),
            "detail": detail,
            "instance": request.url.path,
        },
    )


def failure_response(request: Request, failure: Failure) -> JSONResponse:
    """404 for not-found failures, 400 for everything else."""
    status_code = (
        HTTPStatus.NOT_FOUND if failure.error.is_not_found else HTTPStatus.BAD_REQUEST
    )
    return problem_response(request, status_code, failure.message)


def add_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return problem_response(request, exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return problem_response(
            request, HTTPStatus.INTERNAL_SERVER_ERROR, "An unexpected error occurred."
        )
