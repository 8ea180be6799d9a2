from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, TypeVar

from .option import NONE, Nothing, Option, Some

T = TypeVar("T")


class FakeOption(Generic[T]):
    """Two-variant type shaped exactly like `Option` but unrelated to it.

    It carries no combinators, so code written against it can only branch
    with explicit pattern matching. Convert in with `fake_option` and back
    out with `real_option`.
    """
    __slots__ = ()


@dataclass(frozen=True)
class FakeSome(FakeOption[T]):
    value: T


class FakeNone(FakeOption[None]):
    __slots__ = ()
    _instance: "FakeNone | None" = None

    def __new__(cls) -> "FakeNone":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "FakeNone"
    def __reduce__(self): return (FakeNone, ())


FAKE_NONE: FakeOption[None] = FakeNone()


def fake_option(opt: Option[T]) -> FakeOption[T]:
    match opt:
        case Some(value):
            return FakeSome(value)
        case Nothing():
            return FAKE_NONE  # type: ignore[return-value]
    raise TypeError(f"expected an Option, got {type(opt).__name__}")


def real_option(fake: FakeOption[T]) -> Option[T]:
    match fake:
        case FakeSome(value):
            return Some(value)
        case FakeNone():
            return NONE  # type: ignore[return-value]
    raise TypeError(f"expected a FakeOption, got {type(fake).__name__}")
