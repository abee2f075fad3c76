"""
Cookie-based session authentication.

Tokens are HS256 JWTs signed with ACCESS_TOKEN_SECRET and carried in an
HTTP-only cookie. Logout only clears the cookie: there is no server-side
revocation list, so a retained token stays valid until it expires.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from fastapi import HTTPException, Response, status, Depends
from fastapi.security import APIKeyCookie
import jwt
from app.core.config import settings

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


class SessionAuthService:
    """Issues and verifies signed session tokens."""

    def __init__(
        self,
        secret: Optional[str] = None,
        ttl: Optional[timedelta] = None,
        cookie_name: Optional[str] = None,
        production: Optional[bool] = None,
    ):
        self.secret = secret if secret is not None else settings.ACCESS_TOKEN_SECRET
        self.ttl = ttl if ttl is not None else timedelta(days=settings.SESSION_TTL_DAYS)
        self.cookie_name = cookie_name or settings.SESSION_COOKIE_NAME
        self.production = settings.is_production if production is None else production

        if not self.secret:
            logger.warning("ACCESS_TOKEN_SECRET is not configured - session tokens cannot be issued")

    def is_available(self) -> bool:
        """Check if a signing secret is configured."""
        return bool(self.secret)

    def create_token(self, claims: Dict[str, Any], expires_in: Optional[timedelta] = None) -> str:
        """
        Sign a session token for the given identity claims.

        Args:
            claims: Identity claims, e.g. {"email": ...}
            expires_in: Validity window, defaults to the configured TTL

        Returns:
            Encoded JWT string
        """
        if not self.is_available():
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Authentication service not available"
            )

        now = datetime.now(timezone.utc)
        payload = dict(claims)
        payload["iat"] = now
        payload["exp"] = now + (expires_in if expires_in is not None else self.ttl)
        token = jwt.encode(payload, self.secret, algorithm=ALGORITHM)
        logger.info(f"Session token issued for: {claims.get('email')}")
        return token

    def verify_token(self, token: Optional[str]) -> Dict[str, Any]:
        """
        Verify a session token.

        Raises:
            HTTPException: 401 if the token is missing, malformed, expired or
            signed with another secret
        """
        if not token:
            logger.warning("No session token provided")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="unauthorized access"
            )

        if not self.is_available():
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Authentication service not available"
            )

        try:
            return jwt.decode(token, self.secret, algorithms=[ALGORITHM])
        except jwt.ExpiredSignatureError:
            logger.warning("Expired session token provided")
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid session token: {e}")

        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="unauthorized access"
        )

    def _cookie_flags(self) -> Dict[str, Any]:
        # Cross-site storefront in production, same-site during development
        return {
            "httponly": True,
            "secure": self.production,
            "samesite": "none" if self.production else "strict",
        }

    def set_session_cookie(self, response: Response, token: str) -> None:
        response.set_cookie(
            self.cookie_name,
            token,
            max_age=int(self.ttl.total_seconds()),
            **self._cookie_flags()
        )

    def clear_session_cookie(self, response: Response) -> None:
        response.delete_cookie(self.cookie_name, **self._cookie_flags())


# Session cookie scheme for FastAPI; missing cookies are reported by verify_token
session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)

# Global auth service instance
_auth_service = None

def get_auth_service() -> SessionAuthService:
    """Get the session authentication service."""
    global _auth_service
    if _auth_service is None:
        _auth_service = SessionAuthService()
    return _auth_service


# FastAPI dependency for authentication
async def get_current_user(
    token: Optional[str] = Depends(session_cookie),
    auth_service: SessionAuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """
    FastAPI dependency returning the decoded session claims.

    Raises:
        HTTPException: If authentication fails
    """
    return auth_service.verify_token(token)
