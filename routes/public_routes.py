from fastapi import APIRouter, HTTPException, Path, Query, status
from pymongo.errors import PyMongoError
from models.restaurant import PublicMenuOut
from services.restaurant_service import get_public_menu
from utils.logger import get_logger

logger = get_logger("Public_Menu_Route")
router = APIRouter(prefix="/menu", tags=["Public Menu"])

# Public: the page behind the share link / QR code
@router.get("/{restaurant_ref}", response_model=PublicMenuOut)
async def api_public_menu(restaurant_ref: str = Path(..., description="Restaurant id or slug"),
                          source: str | None = Query(None, description="Set to 'qr' when opened from the QR code")):
    logger.info(f"Public menu requested for {restaurant_ref} (source={source})")
    try:
        return await get_public_menu(restaurant_ref, source)
    except PyMongoError:
        logger.exception("Error in api_public_menu")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Database error")
