import asyncio
import logging

import jwt

from travel_api.application.interfaces.identity_verifier import CallerIdentity, IdentityVerifier
from travel_api.domain.errors import UnauthorizedError

logger = logging.getLogger(__name__)

GOOGLE_JWKS_URL = (
    "https://www.googleapis.com/service_accounts/v1/jwk/securetoken@system.gserviceaccount.com"
)


class FirebaseIdentityVerifier(IdentityVerifier):
    """
    Verifies Firebase Auth ID tokens.

    Tokens are RS256-signed by Google; the signing keys are fetched from the
    published JWKS and cached by PyJWKClient. Audience must be the Firebase
    project id and issuer `https://securetoken.google.com/<project id>`.
    """

    def __init__(self, project_id: str, jwks_client: jwt.PyJWKClient | None = None) -> None:
        if not project_id:
            raise ValueError("firebase_project_id is required for Firebase auth")
        self.project_id = project_id
        self.issuer = f"https://securetoken.google.com/{project_id}"
        self._jwks_client = jwks_client or jwt.PyJWKClient(GOOGLE_JWKS_URL)

    def _decode(self, token: str) -> dict:
        signing_key = self._jwks_client.get_signing_key_from_jwt(token)
        return jwt.decode(
            token,
            signing_key.key,
            algorithms=["RS256"],
            audience=self.project_id,
            issuer=self.issuer,
            options={"require": ["exp", "iat", "sub"]},
        )

    async def verify(self, token: str) -> CallerIdentity:
        try:
            payload = await asyncio.to_thread(self._decode, token)
        except jwt.PyJWTError as exc:
            logger.info("Rejected identity token", extra={"reason": str(exc)})
            raise UnauthorizedError("Invalid token") from exc
        if not payload.get("sub"):
            raise UnauthorizedError("Invalid token")
        return CallerIdentity(
            uid=payload["sub"],
            email=payload.get("email"),
            name=payload.get("name"),
            picture=payload.get("picture"),
        )
