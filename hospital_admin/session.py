from dataclasses import dataclass
from typing import Dict, Optional

from fastapi import Header, HTTPException


@dataclass(frozen=True)
class Session:
    """Credentials of one signed-in admin, handed to the client and the page."""

    token: str

    def auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


def session_from_authorization(authorization: Optional[str] = Header(default=None)) -> Session:
    if not authorization:
        raise HTTPException(status_code=401, detail="Missing Authorization header")

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(status_code=401, detail="Expected a Bearer token")

    return Session(token=token.strip())
