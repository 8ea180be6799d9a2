from __future__ import annotations
from typing import Optional

from .fake import FAKE_NONE, FakeNone, FakeOption, FakeSome, fake_option, real_option
from .logger import ConsoleLogger
from .option import Option
from .theme import Color, Style, StyledImage, User


def resolve_background_color(user: User, app_theme: Style, logger: Optional[ConsoleLogger] = None) -> Option[Color]:
    """Background color for a user's profile screen.

    The avatar style's background wins when there is one; otherwise the app
    theme's background is used. The theme is only consulted when the avatar
    side came up empty, and the result stays absent when both are.

    Args:
        user: Profile owner; the avatar may be absent.
        app_theme: Theme supplying the fallback background.
        logger: Optional logger; a DEBUG line names where the color came from.

    Returns:
        `Some(color)` or `NONE`.
    """
    from_avatar = user.avatar.flat_map(lambda a: a.style.background_color)
    effective = from_avatar.or_else(lambda: app_theme.background_color)
    if logger is not None and logger.is_enabled("DEBUG"):
        source = "avatar" if from_avatar.is_some() else ("app_theme" if effective.is_some() else "none")
        logger.debug("resolved background color", user=user.name, source=source,
                     color=effective.map(str).get_or_else("-"))
    return effective


def resolve_background_color_explicit(user: User, app_theme: Style) -> Option[Color]:
    # Same result as resolve_background_color, written with nothing but
    # pattern matching over FakeOption.
    fallback: FakeOption[Color] = fake_option(app_theme.background_color)
    avatar: FakeOption[StyledImage] = fake_option(user.avatar)
    primary: FakeOption[Color]

    match avatar:
        case FakeSome(styled):
            primary = fake_option(styled.style.background_color)
        case FakeNone():
            primary = FAKE_NONE  # type: ignore[assignment]

    result: FakeOption[Color]
    match primary:
        case FakeSome(color):
            result = FakeSome(color)
        case FakeNone():
            result = fallback

    return real_option(result)
