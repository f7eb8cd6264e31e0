"""Route Dependencies - bearer-token authentication and service wiring.

Invariants:
    - Every customer route depends on require_api_token
    - Missing or unknown tokens raise AuthenticationError (401)
    - One CustomerService per request, bound to that request's AsyncSession
"""

import hmac
import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from customer_api.config import Settings, get_settings
from customer_api.core.errors import AuthenticationError
from customer_api.infrastructure.customer_repository import SqlCustomerRepository
from customer_api.infrastructure.database import get_db
from customer_api.services.customer_service import CustomerService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def require_api_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> str:
    """Accept the request only when it carries one of the configured bearer tokens."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Bearer token required")
    token = credentials.credentials
    if not any(hmac.compare_digest(token, known) for known in settings.api_tokens):
        logger.warning("Rejected request with unknown bearer token")
        raise AuthenticationError("Invalid bearer token")
    return token


def get_customer_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> CustomerService:
    return CustomerService(
        SqlCustomerRepository(db),
        max_page_size=settings.max_page_size,
        default_page_size=settings.default_page_size,
        max_customer_age_years=settings.max_customer_age_years,
    )
