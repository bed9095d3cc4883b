# core/authorization.py
from fastapi import Depends, HTTPException, status
from core.dependencies import get_current_user, CurrentUser, OWNER_ROLE, ADMIN_ROLE
from services.restaurant_service import get_restaurant_doc_for_owner
from utils.logger import get_logger

logger = get_logger("Authorization")

def require_role(*allowed_roles):
    async def _dependency(current_user: CurrentUser = Depends(get_current_user)):
        if current_user.role not in allowed_roles:
            logger.warning(f"Forbidden: {current_user.id} role {current_user.role} not in allowed {allowed_roles}")
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden: insufficient role")
        return current_user
    return _dependency

require_owner = require_role(OWNER_ROLE)
require_admin = require_role(ADMIN_ROLE)

async def get_owned_restaurant(current_user: CurrentUser = Depends(require_owner)) -> dict:
    """
    Resolve the restaurant document of the calling owner.
    Owners have exactly one restaurant, keyed by their identity.
    """
    return await get_restaurant_doc_for_owner(current_user.id)
