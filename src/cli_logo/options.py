from dataclasses import dataclass
from enum import Enum
from typing import Type

from .charsets import Charset
from .colors import ColorMode


class OptionsError(ValueError):
    """Invalid render configuration; `field` names the offending option."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


def _coerce(enum_cls: Type[Enum], value, field: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise OptionsError(field, f"unknown value {value!r} (expected one of: {allowed})") from None


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class RenderOptions:
    width: int = 80
    color_mode: ColorMode = ColorMode.TRUECOLOR
    charset: Charset = Charset.BLOCKS
    invert: bool = False
    background_transparent: bool = False  # only edge-connected light regions
    background_threshold: int = 250

    @classmethod
    def from_values(cls, **values) -> "RenderOptions":
        opt = cls(**values)
        opt.validate()
        return opt

    def validate(self) -> "RenderOptions":
        """Check every field and normalize enum strings in place."""
        if not _is_int(self.width) or self.width <= 0:
            raise OptionsError("width", f"must be a positive integer, got {self.width!r}")

        self.color_mode = _coerce(ColorMode, self.color_mode, "color_mode")
        self.charset = _coerce(Charset, self.charset, "charset")

        if not _is_int(self.background_threshold) or not (
            0 <= self.background_threshold <= 255
        ):
            raise OptionsError(
                "background_threshold",
                f"must be an integer in 0..255, got {self.background_threshold!r}",
            )

        self.invert = bool(self.invert)
        self.background_transparent = bool(self.background_transparent)
        return self
