from pydantic import BaseModel, Field, field_validator
from typing import Dict, Optional
import re

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
CSS_LENGTH = re.compile(r"^(?:0|\d*\.?\d+(?:px|rem|em|%))$")

def normalize_symbol(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value or len(value) > 3:
        raise ValueError("Currency symbol must be 1 to 3 characters")
    return value

class ColorScheme(BaseModel):
    primary: str
    secondary: str
    accent: str
    background: str
    text: str
    heading: str

    @field_validator("*")
    @classmethod
    def check_hex(cls, v: str):
        if not HEX_COLOR.fullmatch(v):
            raise ValueError(f"'{v}' is not a hex color like #RRGGBB")
        return v.upper()

class FontSettings(BaseModel):
    heading_font: str = Field(..., min_length=1)
    body_font: str = Field(..., min_length=1)

class RestaurantTheme(BaseModel):
    name: str = Field(..., min_length=1)
    colors: ColorScheme
    fonts: FontSettings
    border_radius: str = "0.5rem"
    is_dark: bool = False
    currency_symbol: Optional[str] = None

    @field_validator("border_radius")
    @classmethod
    def check_radius(cls, v: str):
        if not CSS_LENGTH.fullmatch(v.strip()):
            raise ValueError("border_radius must be a CSS length such as 0.5rem")
        return v.strip()

    @field_validator("currency_symbol")
    @classmethod
    def check_symbol(cls, v):
        return normalize_symbol(v)

class CurrencyUpdate(BaseModel):
    symbol: str

    @field_validator("symbol")
    @classmethod
    def check_symbol(cls, v):
        return normalize_symbol(v)

class ContrastColors(BaseModel):
    primary: str
    secondary: str
    accent: str

class ThemeOut(BaseModel):
    theme: RestaurantTheme
    currency_symbol: str
    contrast: ContrastColors
    is_default: bool = False

class PresetList(BaseModel):
    presets: Dict[str, RestaurantTheme]
