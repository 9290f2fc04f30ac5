"""Request-scoped access to the objects built by ``create_app``."""

from fastapi import Request

from account_intake.lookup import LookupService


def get_lookup_service(request: Request) -> LookupService:
    return request.app.state.lookup_service
