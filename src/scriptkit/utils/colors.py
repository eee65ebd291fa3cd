"""
Colors — HEX/HSV конвертация и операции над Color

Каналы Color в [0, 1]. HSV: h, s, v тоже в [0, 1] (h — доля оборота).
"""

import colorsys
import random
import re
from typing import Final, Optional

from scriptkit.core.domain.color import Color
from scriptkit.core.errors import InvalidArgumentError
from scriptkit.core.math.numerical_safeguards import clamp, require_not_none, validate_finite, validate_in_range
from scriptkit.core.math.prng import PCG32

_HEX_BODY: Final[re.Pattern[str]] = re.compile(r"[0-9a-fA-F]+")

# Коэффициенты относительной яркости Rec. 709
LUMA_R: Final[float] = 0.2126
LUMA_G: Final[float] = 0.7152
LUMA_B: Final[float] = 0.0722


def hex_to_color(hex_string: str) -> Color:
    """
    Разбор "#rgb", "#rrggbb", "#rrggbbaa" (символ '#' необязателен).

    Examples:
        >>> hex_to_color("#ff0000").to_rgba8()
        (255, 0, 0, 255)

    Raises:
        InvalidArgumentError: неверная длина или не-hex символы
    """
    require_not_none(hex_string, "hex_string")
    if not isinstance(hex_string, str):
        raise InvalidArgumentError(f"hex_string must be a string, got {type(hex_string).__name__}")

    body = hex_string.strip().removeprefix("#")
    if not _HEX_BODY.fullmatch(body):
        raise InvalidArgumentError(f"not a hex color: {hex_string!r}")

    if len(body) == 3:
        body = "".join(ch * 2 for ch in body)
    if len(body) == 6:
        body += "ff"
    if len(body) != 8:
        raise InvalidArgumentError(f"hex color must have 3, 6 or 8 digits, got {hex_string!r}")

    r, g, b, a = (int(body[i:i + 2], 16) for i in range(0, 8, 2))
    return Color.from_rgba8(r, g, b, a)


def color_to_hex(color: Color, include_alpha: bool = False) -> str:
    """
    Examples:
        >>> color_to_hex(Color(r=0.0, g=1.0, b=0.0))
        '#00ff00'
    """
    require_not_none(color, "color")
    r, g, b, a = color.to_rgba8()
    text = f"#{r:02x}{g:02x}{b:02x}"
    return text + f"{a:02x}" if include_alpha else text


def rgb_to_hsv(color: Color) -> tuple[float, float, float]:
    require_not_none(color, "color")
    return colorsys.rgb_to_hsv(color.r, color.g, color.b)


def hsv_to_rgb(h: float, s: float, v: float, alpha: float = 1.0) -> Color:
    """
    HSV → Color. h берётся по модулю 1, s, v и alpha должны быть в [0, 1].
    """
    hue = validate_finite(h, "h") % 1.0
    sat = validate_in_range(s, "s", 0.0, 1.0)
    val = validate_in_range(v, "v", 0.0, 1.0)
    opacity = validate_in_range(alpha, "alpha", 0.0, 1.0)
    r, g, b = colorsys.hsv_to_rgb(hue, sat, val)
    return Color(r=clamp(r, 0.0, 1.0), g=clamp(g, 0.0, 1.0), b=clamp(b, 0.0, 1.0), a=opacity)


def color_lerp(a: Color, b: Color, t: float) -> Color:
    """Покомпонентная интерполяция; t зажимается в [0, 1]."""
    require_not_none(a, "a")
    require_not_none(b, "b")
    k = clamp(validate_finite(t, "t"), 0.0, 1.0)
    return Color(
        r=a.r + (b.r - a.r) * k,
        g=a.g + (b.g - a.g) * k,
        b=a.b + (b.b - a.b) * k,
        a=a.a + (b.a - a.a) * k,
    )


def color_invert(color: Color) -> Color:
    """Инверсия RGB, альфа сохраняется."""
    require_not_none(color, "color")
    return Color(r=1.0 - color.r, g=1.0 - color.g, b=1.0 - color.b, a=color.a)


def color_luminance(color: Color) -> float:
    require_not_none(color, "color")
    return LUMA_R * color.r + LUMA_G * color.g + LUMA_B * color.b


def color_grayscale(color: Color) -> Color:
    y = clamp(color_luminance(color), 0.0, 1.0)
    return Color(r=y, g=y, b=y, a=color.a)


def random_color(seed: Optional[int] = None, alpha: float = 1.0) -> Color:
    """Случайный цвет с заданной альфой; с seed — детерминированно (PCG32)."""
    opacity = validate_in_range(alpha, "alpha", 0.0, 1.0)
    if seed is not None:
        rng = PCG32(seed)
        r, g, b = rng.random(), rng.random(), rng.random()
    else:
        r, g, b = random.random(), random.random(), random.random()
    return Color(r=r, g=g, b=b, a=opacity)
