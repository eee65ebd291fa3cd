"""
PRNG — зафиксированный генератор PCG32 для воспроизводимых seeded-процедур

Все seeded-функции каталога (substitution cipher, seeded shuffle, Monty Hall
с seed, random_string/random_color с seed) используют именно этот генератор,
а не host-default RNG. Это гарантирует бит-в-бит одинаковые перестановки
для одинакового seed в любой среде.

Алгоритм: PCG-XSH-RR 64/32 (O'Neill), процедура seeding как в reference
pcg32_srandom_r(initstate, initseq); unbiased bounded draw как в
pcg32_boundedrand_r.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Final, TypeVar

from scriptkit.core.errors import InvalidArgumentError
from scriptkit.core.math.numerical_safeguards import validate_int

T = TypeVar("T")

MASK_64: Final[int] = (1 << 64) - 1
MASK_32: Final[int] = (1 << 32) - 1
PCG_MULTIPLIER: Final[int] = 6364136223846793005

# Номер потока по умолчанию (initseq из reference-демо)
DEFAULT_STREAM: Final[int] = 54


@dataclass
class PCG32:
    """
    PCG32 генератор. Создаётся на один вызов и не разделяется между вызовами.

    Examples:
        >>> a, b = PCG32(42), PCG32(42)
        >>> [a.next_u32() for _ in range(3)] == [b.next_u32() for _ in range(3)]
        True
    """

    seed: int
    stream: int = DEFAULT_STREAM
    _state: int = field(init=False, repr=False, default=0)
    _inc: int = field(init=False, repr=False, default=1)

    def __post_init__(self) -> None:
        validate_int(self.seed, "seed")
        validate_int(self.stream, "stream")
        self._state = 0
        self._inc = ((self.stream << 1) | 1) & MASK_64
        self.next_u32()
        self._state = (self._state + (self.seed & MASK_64)) & MASK_64
        self.next_u32()

    def next_u32(self) -> int:
        """Следующее 32-битное значение."""
        old = self._state
        self._state = (old * PCG_MULTIPLIER + self._inc) & MASK_64
        xorshifted = (((old >> 18) ^ old) >> 27) & MASK_32
        rot = old >> 59
        return ((xorshifted >> rot) | (xorshifted << ((-rot) & 31))) & MASK_32

    def bounded(self, bound: int) -> int:
        """
        Равномерное целое в [0, bound) без modulo bias.

        Raises:
            InvalidArgumentError: bound вне [1, 2^32]
        """
        validate_int(bound, "bound")
        if not 1 <= bound <= MASK_32 + 1:
            raise InvalidArgumentError(f"bound must be in [1, 2^32], got {bound}")

        threshold = ((MASK_32 + 1) - bound) % bound
        while True:
            r = self.next_u32()
            if r >= threshold:
                return r % bound

    def randint(self, low: int, high: int) -> int:
        """Равномерное целое в [low, high] (включительно)."""
        if high < low:
            raise InvalidArgumentError(f"empty range [{low}, {high}]")
        return low + self.bounded(high - low + 1)

    def random(self) -> float:
        """Float в [0, 1) с 32-битным разрешением."""
        return self.next_u32() / float(MASK_32 + 1)

    def uniform(self, low: float, high: float) -> float:
        return low + (high - low) * self.random()


def seeded_shuffle(items: Sequence[T], seed: int) -> list[T]:
    """
    Fisher-Yates перемешивание (от конца к началу), новый список.

    Для j на шаге i используется PCG32(seed).bounded(i + 1).

    Examples:
        >>> seeded_shuffle([1, 2, 3, 4], 7) == seeded_shuffle([1, 2, 3, 4], 7)
        True
    """
    if items is None:
        raise InvalidArgumentError("items is required, got None")

    rng = PCG32(seed)
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.bounded(i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def seeded_choice(items: Sequence[T], seed: int) -> T:
    """
    Детерминированный выбор элемента.

    Raises:
        InvalidArgumentError: пустая последовательность
    """
    if not items:
        raise InvalidArgumentError("cannot choose from an empty sequence")
    return items[PCG32(seed).bounded(len(items))]
