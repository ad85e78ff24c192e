from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
import jwt
from order_service.core.config import settings
from order_service.core.errors import UnauthenticatedError, UnauthorizedError
from order_service.core.logging import get_logger

log = get_logger(__name__)

security = HTTPBearer(auto_error=False)

class CurrentUser(BaseModel):
    sub: str  # email issued by the auth service
    role: str = "customer"

    @property
    def is_admin(self) -> bool:
        return self.role == settings.ADMIN_ROLE

def get_current_user(creds: HTTPAuthorizationCredentials = Depends(security)) -> CurrentUser:
    if not creds:
        raise UnauthenticatedError("Not authenticated")
    try:
        payload = jwt.decode(creds.credentials, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError:
        raise UnauthenticatedError("Invalid token")
    if payload.get("type") != "access" or not payload.get("sub"):
        raise UnauthenticatedError("Invalid access token")
    return CurrentUser(sub=payload["sub"], role=payload.get("role") or "customer")

def require_admin(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if not user.is_admin:
        raise UnauthorizedError("Admin only")
    return user

def check_permissions(user: CurrentUser, owner_id: str):
    """Owner or admin may touch a resource; anyone else gets a 403."""
    if user.is_admin:
        return
    if user.sub == owner_id:
        return
    log.warning("permission denied: %s tried to access a resource owned by %s", user.sub, owner_id)
    raise UnauthorizedError("Not authorized to access this route")
