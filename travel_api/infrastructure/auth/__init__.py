from travel_api.infrastructure.auth.firebase_verifier import FirebaseIdentityVerifier
from travel_api.infrastructure.auth.local_jwt_verifier import LocalJwtIdentityVerifier

__all__ = ["FirebaseIdentityVerifier", "LocalJwtIdentityVerifier"]
