from dataclasses import dataclass


@dataclass(frozen=True)
class CallerIdentity:
    uid: str
    email: str | None
    name: str | None = None
    picture: str | None = None


class IdentityVerifier:
    async def verify(self, token: str) -> CallerIdentity:
        """Resolve a bearer token to an identity; raises UnauthorizedError."""
        raise NotImplementedError
