"""
Color — RGBA модель цвета

Immutable Pydantic модель. Каналы нормированы в [0, 1], как в host engine.
"""

from pydantic import BaseModel, Field

from scriptkit.core.math.numerical_safeguards import validate_in_range


class Color(BaseModel):
    """
    RGBA цвет с каналами в [0, 1].

    Immutable (frozen=True): любые преобразования создают новый экземпляр.
    """

    r: float = Field(..., ge=0.0, le=1.0, description="Красный канал")
    g: float = Field(..., ge=0.0, le=1.0, description="Зелёный канал")
    b: float = Field(..., ge=0.0, le=1.0, description="Синий канал")
    a: float = Field(1.0, ge=0.0, le=1.0, description="Альфа (1.0 = непрозрачный)")

    model_config = {"frozen": True}

    def to_rgba8(self) -> tuple[int, int, int, int]:
        """Каналы в 8-битном представлении (0..255, round half up)."""
        r, g, b, a = (int(c * 255.0 + 0.5) for c in (self.r, self.g, self.b, self.a))
        return (r, g, b, a)

    def with_alpha(self, alpha: float) -> "Color":
        """Копия с другой альфой; alpha вне [0, 1] → InvalidArgumentError."""
        return Color(r=self.r, g=self.g, b=self.b, a=validate_in_range(alpha, "alpha", 0.0, 1.0))

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> "Color":
        channels = [
            validate_in_range(value, name, 0, 255) / 255.0
            for name, value in (("r", r), ("g", g), ("b", b), ("a", a))
        ]
        return cls(r=channels[0], g=channels[1], b=channels[2], a=channels[3])
