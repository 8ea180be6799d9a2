from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .option import NONE, Option


class Color(Enum):
    FULVOUS = "fulvous"
    FUCHSIA = "fuchsia"
    SMARAGDINE = "smaragdine"
    MAUVE = "mauve"
    WENGE = "wenge"

    def __str__(self) -> str: return self.value


@dataclass(frozen=True)
class Image:
    # opaque to this library; the name is only for display
    name: str = ""


@dataclass(frozen=True)
class Style:
    background_color: Option[Color]
    foreground_color: Color


@dataclass(frozen=True)
class StyledImage:
    image: Image
    style: Style


@dataclass(frozen=True)
class User:
    name: str
    avatar: Option[StyledImage] = field(default=NONE)  # type: ignore[assignment]
