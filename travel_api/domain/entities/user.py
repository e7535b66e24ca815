"""UserAccount entity."""

import hashlib
import re
from dataclasses import dataclass
from datetime import datetime

from travel_api.domain.constants import ROLE_ADMIN, ROLE_USER

PROFILE_PIC_PLACEHOLDER = "https://placehold.co/200x200/cccccc/555555?text=User"

_HTTP_URL = re.compile(r"^https?://", re.IGNORECASE)


def gravatar_url(email: str | None) -> str | None:
    if not email:
        return None
    digest = hashlib.md5(email.strip().lower().encode()).hexdigest()
    return f"https://www.gravatar.com/avatar/{digest}?d=identicon&s=200"


def normalize_profile_pic(raw: str | None) -> str | None:
    """Return a usable http(s) picture URL or None."""
    if not raw:
        return None
    # Image host links are often pasted with a stray ".com" suffix.
    fixed = str(raw).strip().replace(".ibb.co.com", ".ibb.co")
    if _HTTP_URL.match(fixed):
        return fixed
    return None


@dataclass
class UserAccount:
    id: str | None = None
    uid: str | None = None
    email: str = ""
    name: str | None = None
    profile_pic: str | None = None
    role: str = ROLE_USER
    created_at: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    @property
    def resolved_profile_pic(self) -> str:
        return (
            normalize_profile_pic(self.profile_pic)
            or gravatar_url(self.email)
            or PROFILE_PIC_PLACEHOLDER
        )
