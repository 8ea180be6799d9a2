"""
Profile background: resolving an optional color through an optional avatar.

Run: python examples/profile_background.py
"""
from optionpy import (
    Color,
    ConsoleLogger,
    Image,
    NONE,
    Some,
    Style,
    StyledImage,
    User,
    resolve_background_color,
)


def main():
    logger = ConsoleLogger(level="DEBUG")
    plain = Style(background_color=NONE, foreground_color=Color.FULVOUS)
    loud = Style(background_color=Some(Color.FUCHSIA), foreground_color=Color.SMARAGDINE)
    muted = Style(background_color=Some(Color.MAUVE), foreground_color=Color.WENGE)

    cases = {
        "styled avatar": (User("Sally Nguyen", Some(StyledImage(Image("sally.png"), muted))), loud),
        "plain avatar": (User("Sally Nguyen", Some(StyledImage(Image("sally.png"), plain))), loud),
        "no avatar": (User("Sally Nguyen", NONE), muted),
        "nothing set": (User("Sally Nguyen", NONE), plain),
    }
    for label, (user, theme) in cases.items():
        color = resolve_background_color(user, theme, logger=logger.bind(case=label))
        match color:
            case Some(c):
                print(f"{label} => {c}")
            case _:
                print(f"{label} => (default background)")


if __name__ == "__main__":
    main()
