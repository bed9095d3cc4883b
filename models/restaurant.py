# models/restaurant.py
from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from models.menu import MenuSection, PublicMenuSection
from models.theme import RestaurantTheme, ContrastColors

class RestaurantCreate(BaseModel):
    name: str = Field(min_length=2)
    location: Optional[str] = None
    contact: Optional[str] = None
    description: Optional[str] = None
    email: Optional[EmailStr] = None
    is_public: bool = False

class RestaurantUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2)
    location: Optional[str] = None
    contact: Optional[str] = None
    description: Optional[str] = None
    email: Optional[EmailStr] = None
    is_public: Optional[bool] = None

class RestaurantListItem(BaseModel):
    id: str
    name: str
    location: Optional[str] = None
    owner_email: Optional[str] = None
    is_public: bool = False
    is_blocked: bool = False

class RestaurantOut(RestaurantListItem):
    owner_id: str
    slug: Optional[str] = None
    contact: Optional[str] = None
    description: Optional[str] = None
    email: Optional[str] = None
    menu_sections: List[MenuSection] = Field(default_factory=list)
    theme: Optional[RestaurantTheme] = None
    currency_symbol: Optional[str] = None
    views: int = 0
    qr_scans: int = 0
    version: int = 0
    share_url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

class SectionStat(BaseModel):
    name: str
    items: int

class DashboardStats(BaseModel):
    restaurant_id: str
    name: str
    sections_count: int
    items_count: int
    status: str
    is_public: bool
    is_blocked: bool
    views: int
    qr_scans: int
    share_url: str
    chart: List[SectionStat]

class PublicMenuOut(BaseModel):
    id: str
    name: str
    location: Optional[str] = None
    contact: Optional[str] = None
    description: Optional[str] = None
    currency_symbol: str
    theme: RestaurantTheme
    contrast: ContrastColors
    sections: List[PublicMenuSection]
