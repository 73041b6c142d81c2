"""Per-channel bit manipulation of RGB images and preset handling."""

from __future__ import annotations

import math
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache
from itertools import islice
from typing import Any, Iterator

from PIL import Image

U32_MAX = 0xFFFF_FFFF
_MASK64 = 0xFFFF_FFFF_FFFF_FFFF


def _splitmix64(seed: int) -> Iterator[int]:
    state = seed & _MASK64
    while True:
        state = (state + 0x9E3779B97F4A7C15) & _MASK64
        z = state
        z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & _MASK64
        z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & _MASK64
        yield z ^ (z >> 31)


def _rotl64(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _MASK64


@lru_cache(maxsize=None)
def _random_byte(seed: int) -> int:
    """First byte drawn from a xoshiro256++ generator seeded through SplitMix64."""
    s0, _s1, _s2, s3 = islice(_splitmix64(seed), 4)
    result = (_rotl64((s0 + s3) & _MASK64, 23) + s0) & _MASK64
    return (result >> 32) & 0xFF


def _check_u32(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"{name} must be between 0 and {U32_MAX}, got {value}")
    return value


class ChangeMode(StrEnum):
    """How each colour channel value is changed."""

    SHIFT_LEFT = "ShiftLeft"
    SHIFT_RIGHT = "ShiftRight"
    NOT = "Not"
    MULTIPLY = "Multiply"
    SQRT = "Sqrt"
    XOR = "Xor"
    OR = "Or"
    AND = "And"
    EXPONENT = "Exponent"
    RANDOM_ADD = "RandomAdd"
    RANDOM_MUL = "RandomMul"

    def shift(self, value: int, other: int) -> int:
        """Apply this mode to a channel byte, using ``other`` as the operand."""
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFF:
            raise ValueError(f"channel value must be between 0 and 255, got {value!r}")
        other = _check_u32("operand", other)

        match self:
            case ChangeMode.SHIFT_LEFT:
                return (value << (other & 7)) & 0xFF
            case ChangeMode.SHIFT_RIGHT:
                return value >> (other & 7)
            case ChangeMode.NOT:
                return ~value & 0xFF
            case ChangeMode.MULTIPLY:
                if other > 0xFF:
                    raise ValueError(f"multiplier must fit in a byte, got {other}")
                return (value * other) & 0xFF
            case ChangeMode.SQRT:
                return math.isqrt(value)
            case ChangeMode.XOR:
                return value ^ (other & 0xFF)
            case ChangeMode.OR:
                return value | (other & 0xFF)
            case ChangeMode.AND:
                return value & other & 0xFF
            case ChangeMode.EXPONENT:
                return pow(value, other, 256)
            case ChangeMode.RANDOM_ADD:
                return (value + _random_byte(other)) & 0xFF
            case ChangeMode.RANDOM_MUL:
                return (value * _random_byte(other)) & 0xFF
        raise AssertionError(f"unhandled mode {self!r}")

    @classmethod
    def from_string(cls, string: str) -> ChangeMode:
        """Look a mode up by its name, e.g. ``"ShiftLeft"``."""
        try:
            return cls(string)
        except ValueError:
            raise ValueError(f"Invalid ChangeMode variant: '{string}'") from None


@dataclass(frozen=True)
class BitChange:
    """Change every channel with one mode and a per-channel operand."""

    mode: ChangeMode
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        if not isinstance(self.mode, ChangeMode):
            raise ValueError(f"mode must be a ChangeMode, got {self.mode!r}")
        for name in ("red", "green", "blue"):
            _check_u32(name, getattr(self, name))


DeepfryAlgorithm = BitChange


@lru_cache(maxsize=4096)
def _lookup(mode: ChangeMode, other: int) -> tuple[int, ...]:
    return tuple(mode.shift(value, other) for value in range(256))


def deepfry(image: Image.Image, algo: DeepfryAlgorithm) -> Image.Image:
    """Return a deepfried RGB copy of ``image``; other modes are converted to RGB first."""
    rgb = image if image.mode == "RGB" else image.convert("RGB")
    match algo:
        case BitChange(mode=mode, red=red, green=green, blue=blue):
            table = [*_lookup(mode, red), *_lookup(mode, green), *_lookup(mode, blue)]
            return rgb.point(table)
    raise TypeError(f"unsupported algorithm: {algo!r}")


@dataclass
class AlgorithmConfig:
    """One algorithm entry of a preset, as written in a configuration file."""

    algorithm: str
    change_mode: str | None = None
    red: int | None = None
    green: int | None = None
    blue: int | None = None

    def algo(self) -> DeepfryAlgorithm:
        """Validate the entry and build the algorithm it describes."""
        if self.algorithm != "BitChange":
            raise ValueError(f"invalid algorithm: {self.algorithm}")
        if self.change_mode is None:
            raise ValueError("bit changing mode is not set")
        try:
            mode = ChangeMode(self.change_mode)
        except ValueError:
            raise ValueError(f"invalid bit changing mode {self.change_mode!r}") from None
        return BitChange(mode, self.red or 0, self.green or 0, self.blue or 0)

    @classmethod
    def _from_table(cls, table: Any) -> AlgorithmConfig:
        if not isinstance(table, Mapping):
            raise ValueError(f"algorithm entry must be a table, got {table!r}")
        if "algorithm" not in table:
            raise ValueError("missing field `algorithm`")
        algorithm = table["algorithm"]
        if not isinstance(algorithm, str):
            raise ValueError(f"`algorithm` must be a string, got {algorithm!r}")
        change_mode = table.get("change_mode")
        if change_mode is not None and not isinstance(change_mode, str):
            raise ValueError(f"`change_mode` must be a string, got {change_mode!r}")
        channels = {
            name: _check_u32(name, table[name])
            for name in ("red", "green", "blue")
            if name in table
        }
        return cls(algorithm=algorithm, change_mode=change_mode, **channels)


@dataclass
class Preset:
    """A sequence of algorithm configurations applied one after another."""

    algorithms: list[AlgorithmConfig]

    @classmethod
    def from_toml(cls, text: str) -> Preset:
        """Parse a preset from TOML text with an ``[[algorithms]]`` array."""
        data = tomllib.loads(text)
        if "algorithms" not in data:
            raise ValueError("missing field `algorithms`")
        entries = data["algorithms"]
        if not isinstance(entries, list):
            raise ValueError("`algorithms` must be an array of tables")
        return cls([AlgorithmConfig._from_table(entry) for entry in entries])