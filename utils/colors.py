LIGHT_THRESHOLD = 0.5
DARK_TEXT = "#000000"
LIGHT_TEXT = "#FFFFFF"

def hex_to_rgb(color: str):
    value = color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(c * 2 for c in value)
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {color}")
    try:
        return tuple(int(value[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Invalid hex color: {color}")

def brightness(color: str) -> float:
    """Perceived brightness in [0, 1] using the ITU-R 601 luma weights."""
    r, g, b = hex_to_rgb(color)
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255

def is_color_light(color: str) -> bool:
    return brightness(color) > LIGHT_THRESHOLD

def get_contrast_color(color: str) -> str:
    return DARK_TEXT if is_color_light(color) else LIGHT_TEXT
