"""Authentication router for OAuth sign-in."""

import logging

from fastapi import APIRouter, Query
from sqlalchemy.exc import SQLAlchemyError

from voicehub.presentation.api.dependencies import DBSession, IdentityResolver
from voicehub.presentation.api.schemas.auth import (
    AuthorizationUrlResponse,
    AuthResultResponse,
    OAuthCallbackRequest,
    UserResponse,
)
from voicehub.presentation.api.schemas.common import ErrorResponse
from voicehub_identity.exceptions import OAuthError, StoreFailureError

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input or provider failure"},
    403: {"model": ErrorResponse, "description": "Account may not sign in"},
    500: {"model": ErrorResponse, "description": "Account store failure"},
}


@router.get(
    "/oauth/{provider}/authorize",
    response_model=AuthorizationUrlResponse,
    responses={400: ERROR_RESPONSES[400]},
    summary="Get provider consent URL",
)
async def oauth_authorize(
    provider: str,
    resolver: IdentityResolver,
    role: str = Query(default="reviewer"),
    intent: str = Query(default="signin"),
) -> AuthorizationUrlResponse:
    """
    Build the URL the browser is redirected to for provider consent.

    The returned ``state`` carries the requested role and whether the user
    came from the sign-in or the sign-up page.
    """
    url, state = resolver.authorization_url(provider, role, intent)
    return AuthorizationUrlResponse(authorization_url=url, state=state)


@router.post(
    "/oauth/{provider}",
    response_model=AuthResultResponse,
    responses=ERROR_RESPONSES,
    summary="Sign in with an OAuth provider",
)
async def oauth_sign_in(
    provider: str,
    request: OAuthCallbackRequest,
    resolver: IdentityResolver,
    session: DBSession,
) -> AuthResultResponse:
    """
    Exchange an authorization code for an account.

    Existing accounts are signed in after the status checks pass. Unknown
    reviewers are registered as pending and must wait for admin approval.
    """
    try:
        result = await resolver.authenticate(provider, request.code, request.role)
        await session.commit()
    except OAuthError:
        await session.rollback()
        raise
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error("Commit failed during %s sign-in: %s", provider, e)
        raise StoreFailureError from e

    return AuthResultResponse(
        is_new_user=result.is_new_user,
        user=UserResponse.from_account(result.account),
    )
