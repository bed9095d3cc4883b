from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError
from typing import Optional
from pydantic import BaseModel
from utils.jwt_handler import decode_access_token
from utils.logger import get_logger

logger = get_logger("Dependencies")

OWNER_ROLE = "owner"
ADMIN_ROLE = "admin"

# tokens come from the identity provider; tokenUrl only feeds the OpenAPI docs
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")

class CurrentUser(BaseModel):
    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    role: str = OWNER_ROLE

async def get_current_user(token: str = Depends(oauth2_scheme)) -> CurrentUser:
    """
    Decode the bearer token issued by the identity provider and build the CurrentUser.
    The `sub` claim is the owner identity, `role` is either owner or admin.
    """
    try:
        payload = decode_access_token(token)
    except JWTError:
        logger.error("JWT Error: Invalid token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"}
        )
    subject = payload.get("sub")
    if not subject:
        logger.debug("Subject not found in token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token: no subject found",
            headers={"WWW-Authenticate": "Bearer"}
        )
    current_user = CurrentUser(
        id=str(subject),
        email=payload.get("email"),
        full_name=payload.get("name"),
        role=payload.get("role") or OWNER_ROLE
    )
    logger.debug(f"Current user resolved: {current_user.id} ({current_user.role})")
    return current_user
