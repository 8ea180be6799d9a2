from .option import Option, Some, NONE, Nothing, from_nullable
from .fake import FakeOption, FakeSome, FakeNone, FAKE_NONE, fake_option, real_option
from .theme import Color, Image, Style, StyledImage, User
from .resolver import resolve_background_color, resolve_background_color_explicit
from .logger import ConsoleLogger
