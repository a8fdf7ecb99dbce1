from typing import Optional

from pydantic import BaseModel


class AuthorizationDecision(BaseModel):
    role: Optional[str] = None
    resource: Optional[str] = None
    granted: bool
    error: Optional[str] = None
