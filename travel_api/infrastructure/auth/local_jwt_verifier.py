import jwt

from travel_api.application.interfaces.identity_verifier import CallerIdentity, IdentityVerifier
from travel_api.domain.errors import UnauthorizedError


class LocalJwtIdentityVerifier(IdentityVerifier):
    """Shared-secret tokens for development and tests; claims mirror Firebase's."""

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        self.secret = secret
        self.algorithm = algorithm

    def create_token(self, uid: str, email: str | None, **claims) -> str:
        payload = {"sub": uid, "email": email, **claims}
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    async def verify(self, token: str) -> CallerIdentity:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["sub"]},
            )
        except jwt.PyJWTError as exc:
            raise UnauthorizedError("Invalid token") from exc
        return CallerIdentity(
            uid=payload["sub"],
            email=payload.get("email"),
            name=payload.get("name"),
            picture=payload.get("picture"),
        )
