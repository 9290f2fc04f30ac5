"""Routes for health, statistics and account lookups."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from account_intake.api.dependencies import get_lookup_service
from account_intake.api.schemas import AccountResponse, HealthResponse, StatsResponse
from account_intake.exceptions import AccountNotFoundError, InvalidLookupKeyError, StoreError
from account_intake.lookup import LookupService

logger = logging.getLogger(__name__)

router = APIRouter()

AVAILABLE_ENDPOINTS = [
    "GET /health",
    "GET /stats",
    "GET /accounts/:accountNumber",
    "GET /accounts?account_number=...",
]


def error_response(status_code: int, error: str, message: str, **extra: object) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "message": message, **extra},
    )


def _now() -> datetime:
    return datetime.now(timezone.utc)


@router.get("/health", response_model=HealthResponse)
def health() -> dict:
    return {"status": "ok", "timestamp": _now()}


@router.get("/stats", response_model=StatsResponse)
def stats(lookup_service: LookupService = Depends(get_lookup_service)):
    """Total number of stored accounts."""
    try:
        count = lookup_service.count()
    except StoreError as e:
        return error_response(500, "Database error", str(e))
    return {"total_accounts": count, "timestamp": _now()}


@router.get("/accounts/{account_number}", response_model=AccountResponse)
def get_account(
    account_number: str,
    lookup_service: LookupService = Depends(get_lookup_service),
):
    """Look up an account by the account number in the path."""
    return _lookup(lookup_service, account_number)


@router.get("/accounts", response_model=AccountResponse)
def find_account(
    account_number: str | None = Query(default=None),
    lookup_service: LookupService = Depends(get_lookup_service),
):
    """Look up an account by the ``account_number`` query parameter."""
    if not account_number:
        return error_response(
            400,
            "Bad Request",
            "Please provide an account_number query parameter",
            example="/accounts?account_number=ACC001",
        )
    return _lookup(lookup_service, account_number)


def _lookup(lookup_service: LookupService, account_number: str):
    try:
        record = lookup_service.lookup(account_number)
    except InvalidLookupKeyError as e:
        return error_response(400, "Bad Request", str(e))
    except AccountNotFoundError as e:
        return error_response(404, "Not Found", str(e))
    except StoreError:
        logger.exception("Database error looking up account %r", account_number)
        return error_response(
            500,
            "Internal Server Error",
            "An error occurred while looking up the account",
        )
    return AccountResponse.from_record(record)
