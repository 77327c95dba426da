"""
Configuration for calcrepr.

The only tunable is the integer policy: how wide integers are and what
happens when a literal or result does not fit. Settings live in an
optional TOML file:

    [integers]
    bits = 32
    overflow = "checked"   # or "wrap"
"""

import tomllib
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from calcrepr.core.errors import ConfigError, IntegerOverflow


class OverflowMode(StrEnum):
    """What to do with a value outside the configured range."""

    CHECKED = "checked"
    WRAP = "wrap"


@dataclass(frozen=True)
class IntegerPolicy:
    """Signed integer width and overflow handling."""

    bits: int = 32  # 0 = unbounded
    overflow: OverflowMode = OverflowMode.CHECKED

    @property
    def min_value(self) -> int | None:
        return -(1 << (self.bits - 1)) if self.bits else None

    @property
    def max_value(self) -> int | None:
        return (1 << (self.bits - 1)) - 1 if self.bits else None

    def fit(self, value: int) -> int:
        """Return ``value`` constrained to the policy, or raise IntegerOverflow."""
        if not self.bits:
            return value
        assert self.min_value is not None and self.max_value is not None
        if self.min_value <= value <= self.max_value:
            return value
        if self.overflow == OverflowMode.CHECKED:
            raise IntegerOverflow(value, self.bits)
        span = 1 << self.bits
        return (value - self.min_value) % span + self.min_value


DEFAULT_POLICY = IntegerPolicy()


@dataclass
class CalcConfig:
    """Top-level configuration loaded from calcrepr.toml."""

    integers: IntegerPolicy = field(default_factory=IntegerPolicy)


def load_config(path: Path) -> CalcConfig:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    integers = data.get("integers", {})
    if not isinstance(integers, dict):
        raise ConfigError(f"integers must be a table, got {integers!r}")

    bits = integers.get("bits", 32)
    if not isinstance(bits, int) or isinstance(bits, bool) or bits < 0:
        raise ConfigError(f"integers.bits must be a non-negative integer, got {bits!r}")

    mode = integers.get("overflow", OverflowMode.CHECKED.value)
    try:
        overflow = OverflowMode(mode)
    except (TypeError, ValueError):
        valid = ", ".join(m.value for m in OverflowMode)
        raise ConfigError(f"integers.overflow must be one of {valid}, got {mode!r}") from None

    return CalcConfig(integers=IntegerPolicy(bits=bits, overflow=overflow))
