"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from PIL import Image, ImageDraw, ImageFont

ICON_SIZE = 64
_FONT_NAMES = ("segoeuib.ttf", "DejaVuSans-Bold.ttf")
_MAX_FONT_SIZE = 120
_MIN_FONT_SIZE = 10


def _fitting_font(draw: ImageDraw.ImageDraw, label: str, box: int):
    """Largest bold font drawing ``label`` within ``box`` pixels square.

    Falls back to Pillow's built-in font when no TrueType face is installed.
    """
    for name in _FONT_NAMES:
        try:
            ImageFont.truetype(name, _MIN_FONT_SIZE)
        except OSError:
            continue
        for size in range(_MAX_FONT_SIZE, _MIN_FONT_SIZE, -1):
            font = ImageFont.truetype(name, size)
            left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
            if right - left <= box and bottom - top <= box:
                return font
        return ImageFont.truetype(name, _MIN_FONT_SIZE)
    return ImageFont.load_default()


def create_icon_image(label: str) -> Image.Image:
    """Return a 64×64 RGBA image with ``label`` (today's day number) drawn large."""
    img = Image.new("RGBA", (ICON_SIZE, ICON_SIZE), "white")
    draw = ImageDraw.Draw(img)
    font = _fitting_font(draw, label, ICON_SIZE)

    # Centre the visible ink, not the font's line box
    left, top, right, bottom = draw.textbbox((0, 0), label, font=font)
    origin = ((ICON_SIZE - (right - left)) / 2 - left,
              (ICON_SIZE - (bottom - top)) / 2 - top)
    draw.text(origin, label, fill="black", font=font)
    return img
