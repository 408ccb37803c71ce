"""
Authentication for the Locked API.
Provides the JWT identity provider and FastAPI dependencies for securing endpoints.

Supports two JWT types:
- Firebase ID tokens: RS256, validated via Google's JWKS (aud = Firebase project)
- Service tokens: HS256, validated via the shared JWT_SECRET
"""
import logging
from functools import lru_cache
from typing import Optional

import jwt
from fastapi import Depends, Header, HTTPException

from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)

FIREBASE_JWKS_URL = (
    "https://www.googleapis.com/service_accounts/v1/jwk/securetoken@system.gserviceaccount.com"
)
FIREBASE_ISSUER_PREFIX = "https://securetoken.google.com/"
SERVICE_JWT_ALGORITHM = "HS256"


@lru_cache
def get_jwks_client() -> jwt.PyJWKClient:
    """Get or create the JWKS client for Firebase ID token validation."""
    return jwt.PyJWKClient(FIREBASE_JWKS_URL)


def decode_principal(token: str, settings: Settings) -> str:
    """
    Validate a JWT and return its subject.

    Raises:
        jwt.InvalidTokenError: If the token is malformed, expired, fails
            validation, or no validator for its algorithm is configured
    """
    header = jwt.get_unverified_header(token)
    algorithm = header.get("alg")

    if algorithm == SERVICE_JWT_ALGORITHM:
        if not settings.jwt_secret:
            raise jwt.InvalidTokenError("HS256 tokens not accepted (JWT_SECRET not set)")
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[SERVICE_JWT_ALGORITHM],
            audience=settings.jwt_audience,
            options={"verify_aud": settings.jwt_audience is not None},
        )
    elif algorithm == "RS256":
        if not settings.firebase_project_id:
            raise jwt.InvalidTokenError("RS256 tokens not accepted (FIREBASE_PROJECT_ID not set)")
        signing_key = get_jwks_client().get_signing_key_from_jwt(token)
        payload = jwt.decode(
            token,
            signing_key.key,
            algorithms=["RS256"],
            audience=settings.firebase_project_id,
            issuer=f"{FIREBASE_ISSUER_PREFIX}{settings.firebase_project_id}",
        )
    else:
        raise jwt.InvalidTokenError(f"Unsupported token algorithm: {algorithm}")

    user_id = payload.get("sub")
    if not user_id:
        raise jwt.InvalidTokenError("Token missing user ID")
    return user_id


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    return authorization.split(" ", 1)[1]


class JwtIdentityProvider:
    """
    IdentityProvider backed by the bearer token of the current request.

    An absent, malformed or invalid token means nobody is signed in.
    """

    def __init__(self, authorization: Optional[str], settings: Settings):
        self._token = _bearer_token(authorization)
        self._settings = settings

    def current_principal_id(self) -> Optional[str]:
        if self._token is None:
            return None
        try:
            return decode_principal(self._token, self._settings)
        except jwt.PyJWKClientError as e:
            logger.warning(f"JWKS lookup failed: {e}")
            return None
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected token: {e}")
            return None


def validate_jwt(authorization: str, settings: Settings) -> str:
    """Validate a bearer token and return user_id, raising 401 on failure."""
    token = _bearer_token(authorization)
    if token is None:
        raise HTTPException(status_code=401, detail="Invalid authorization header format")

    try:
        user_id = decode_principal(token, settings)
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=401, detail="Token expired")
    except jwt.PyJWKClientError as e:
        logger.warning(f"JWKS lookup failed: {e}")
        raise HTTPException(status_code=401, detail="Unable to verify token")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT: {e}")
        raise HTTPException(status_code=401, detail=f"Invalid token: {str(e)}")

    logger.debug(f"JWT validated for user: {user_id}")
    return user_id


async def get_current_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Authenticate via bearer JWT.
    Returns user_id string.

    Usage:
        @app.get("/protected")
        async def protected_route(user_id: str = Depends(get_current_user)):
            return {"user_id": user_id}
    """
    if not authorization:
        raise HTTPException(
            status_code=401,
            detail="Missing authentication. Provide Authorization header.",
        )
    return validate_jwt(authorization, settings)


def get_identity_provider(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> JwtIdentityProvider:
    """Identity provider for the current request (never raises)."""
    return JwtIdentityProvider(authorization, settings)
