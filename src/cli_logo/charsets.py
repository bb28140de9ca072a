"""Character ramps used to represent brightness levels (darkest first)."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Charset(str, Enum):
    DETAILED = "detailed"
    SIMPLE = "simple"
    BLOCKS = "blocks"


@dataclass(frozen=True)
class CharacterRamp:
    glyphs: Tuple[str, ...]

    @classmethod
    def from_string(cls, chars: str) -> "CharacterRamp":
        return cls(tuple(chars))

    def inverted(self) -> "CharacterRamp":
        return CharacterRamp(self.glyphs[::-1])

    def __len__(self) -> int:
        return len(self.glyphs)

    def __getitem__(self, idx: int) -> str:
        return self.glyphs[idx]

    def __str__(self) -> str:
        return "".join(self.glyphs)


# -----------------------------
# Built-in ramps
# -----------------------------
DETAILED_CHARS = "@%#*+=-:. "
SIMPLE_CHARS = "█▓▒░ "
BLOCK_CHARS = "██▓▓▒▒░░  "

RAMPS = {
    Charset.DETAILED: CharacterRamp.from_string(DETAILED_CHARS),
    Charset.SIMPLE: CharacterRamp.from_string(SIMPLE_CHARS),
    Charset.BLOCKS: CharacterRamp.from_string(BLOCK_CHARS),
}


def get_ramp(charset: Charset, invert: bool = False) -> CharacterRamp:
    """Return the ramp for `charset`, reversed once when `invert` is set."""
    ramp = RAMPS[Charset(charset)]
    return ramp.inverted() if invert else ramp
