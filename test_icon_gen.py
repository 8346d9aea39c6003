from PIL import ImageOps

from icon_gen import ICON_SIZE, create_icon_image


def test_icon_shape() -> None:
    img = create_icon_image("17")
    assert img.size == (ICON_SIZE, ICON_SIZE)
    assert img.mode == "RGBA"


def test_label_is_drawn() -> None:
    darkest, _lightest = create_icon_image("7").convert("L").getextrema()
    assert darkest < 128


def test_label_is_centred() -> None:
    ink = ImageOps.invert(create_icon_image("31").convert("L")).getbbox()
    assert ink is not None
    left, top, right, bottom = ink
    assert abs((left + right) / 2 - ICON_SIZE / 2) <= 4
    assert abs((top + bottom) / 2 - ICON_SIZE / 2) <= 4
