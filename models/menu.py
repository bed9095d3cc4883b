from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional
from uuid import uuid4

def new_id() -> str:
    return uuid4().hex

def not_blank(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value

def check_price_invariant(price: Optional[float], variations: list):
    if variations and price is not None:
        raise ValueError("Provide either a price or price variations, not both")
    if not variations and price is None:
        raise ValueError("A price is required when there are no price variations")

class PriceVariation(BaseModel):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, allow_inf_nan=False)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v):
        return not_blank(v)

class MenuItemCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    price_variations: List[PriceVariation] = Field(default_factory=list)
    image_url: Optional[str] = None
    disabled: bool = False
    out_of_stock: bool = False

    @field_validator("name")
    @classmethod
    def strip_name(cls, v):
        return not_blank(v)

    @field_validator("image_url")
    @classmethod
    def empty_image_is_none(cls, v):
        # the editor sends "" when the image field is cleared
        if v is None:
            return None
        return v.strip() or None

    @model_validator(mode="after")
    def check_price(self):
        check_price_invariant(self.price, self.price_variations)
        return self

class MenuItem(MenuItemCreate):
    id: str = Field(default_factory=new_id)

class MenuItemUpdate(BaseModel):
    """Partial update. Fields left out keep their stored value; the merged item is re-validated."""
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0, allow_inf_nan=False)
    price_variations: Optional[List[PriceVariation]] = None
    image_url: Optional[str] = None
    disabled: Optional[bool] = None
    out_of_stock: Optional[bool] = None

class MenuSectionCreate(BaseModel):
    name: str = Field(..., min_length=1)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v):
        return not_blank(v)

class MenuSectionUpdate(BaseModel):
    name: Optional[str] = None
    disabled: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v):
        return not_blank(v)

class MenuSection(MenuSectionCreate):
    id: str = Field(default_factory=new_id)
    items: List[MenuItem] = Field(default_factory=list)
    disabled: bool = False

    @model_validator(mode="after")
    def unique_item_ids(self):
        ids = [item.id for item in self.items]
        if len(ids) != len(set(ids)):
            raise ValueError(f"Duplicate item ids in section '{self.name}'")
        return self

class MoveRequest(BaseModel):
    from_index: int = Field(..., ge=0)
    to_index: int = Field(..., ge=0)

class MenuSave(BaseModel):
    sections: List[MenuSection]
    version: int = Field(..., ge=0)

    @model_validator(mode="after")
    def unique_section_ids(self):
        ids = [section.id for section in self.sections]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate section ids")
        return self

class MenuOut(BaseModel):
    restaurant_id: str
    version: int
    sections: List[MenuSection]

class PublicPriceVariation(PriceVariation):
    display_price: str

class PublicMenuItem(BaseModel):
    id: str
    name: str
    description: str = ""
    price: Optional[float] = None
    display_price: Optional[str] = None
    price_variations: List[PublicPriceVariation] = Field(default_factory=list)
    image_url: Optional[str] = None

class PublicMenuSection(BaseModel):
    id: str
    name: str
    items: List[PublicMenuItem] = Field(default_factory=list)
