"""FastAPI application factory.

Startup order: initialize the store, run one ingestion against the
configured CSV, then start accepting requests. A failed startup ingestion
aborts startup.
"""

import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException

from account_intake.api.routes import AVAILABLE_ENDPOINTS, error_response, router
from account_intake.config import AppConfig
from account_intake.ingest import IngestionPipeline
from account_intake.lookup import LookupService
from account_intake.store import AccountStore

logger = logging.getLogger(__name__)

# Statuses that mean "no route for this method and path".
UNMATCHED_ROUTE_STATUSES = {404, 405}


def create_app(config: AppConfig | None = None, store: AccountStore | None = None) -> FastAPI:
    """Build the API around one explicitly constructed store.

    Parameters
    ----------
    config : AppConfig | None
        Application config, read from the environment when omitted.
    store : AccountStore | None
        Store to serve from. Defaults to an ``AccountStore`` at
        ``config.store.db_path``.

    Returns
    -------
    FastAPI
        The application, with ``config``, ``store`` and ``lookup_service``
        on ``app.state``.
    """
    config = config or AppConfig.from_env()
    if store is None:
        store = AccountStore(config.store.db_path, flush_on_write=config.store.flush_on_write)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        store.initialize()
        try:
            if config.ingest.auto_ingest:
                logger.info("Auto-ingesting CSV at startup from %s", config.ingest.csv_path)
                await run_in_threadpool(IngestionPipeline(store).ingest, config.ingest.csv_path)
            logger.info("Account store ready with %d records", store.count())
            logger.info("Available endpoints: %s", ", ".join(AVAILABLE_ENDPOINTS))
            yield
        finally:
            store.close()

    app = FastAPI(title="account-intake", lifespan=lifespan)
    app.state.config = config
    app.state.store = store
    app.state.lookup_service = LookupService(store)

    app.include_router(router, tags=["accounts"])

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code in UNMATCHED_ROUTE_STATUSES:
            return error_response(
                404,
                "Not Found",
                f"Route {request.method} {request.url.path} not found",
                available_endpoints=AVAILABLE_ENDPOINTS,
            )
        return error_response(exc.status_code, _reason(exc.status_code), str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(500, "Internal Server Error", "An unexpected error occurred")

    return app


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"
