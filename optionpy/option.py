from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def _ensure_option(v: object, where: str) -> "Option":
    if not isinstance(v, Option):
        raise TypeError(f"{where} must return an Option, got {type(v).__name__}")
    return v


class Option(Generic[T]):
    """Value that is either present (`Some(value)`) or absent (`NONE`).

    Every operation is total. Functions passed to `map`, `flat_map` and
    `fold` are only invoked for the variant they belong to, and the fallback
    of `or_else` is a thunk that runs only when the receiver is absent.

    Example:
        ```python
        name = from_nullable(row.get("name")).map(str.strip).get_or_else("anon")

        match opt:
            case Some(v): use(v)
            case Nothing(): skip()
        ```
    """
    __slots__ = ()

    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return _ensure_option(f(self.value), "flat_map function")  # type: ignore[attr-defined]
        return NONE

    def or_else(self, fallback: Callable[[], "Option[T]"]) -> "Option[T]":
        if self.is_some():
            return self
        return _ensure_option(fallback(), "or_else fallback")

    def get_or_else(self, default: U) -> T | U:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    unwrap_or = get_or_else

    def fold(self, if_none: Callable[[], U], if_some: Callable[[T], U]) -> U:
        if self.is_some():
            return if_some(self.value)  # type: ignore[attr-defined]
        return if_none()

    def filter(self, pred: Callable[[T], bool]) -> "Option[T]":
        if self.is_some() and pred(self.value):  # type: ignore[attr-defined]
            return self
        return NONE

    def to_nullable(self) -> Optional[T]:
        return self.value if self.is_some() else None  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Some(Option[T]):
    value: T
    def is_some(self) -> bool: return True


class _None(Option[None]):
    __slots__ = ()
    _instance: "Optional[_None]" = None

    def __new__(cls) -> "_None":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str: return "None"
    def __reduce__(self): return (_None, ())
    def is_some(self) -> bool: return False


NONE: Option[None] = _None()

# public name for matching the absent variant: `case Nothing():`
Nothing = _None


def from_nullable(v: Optional[T]) -> Option[T]:
    return Some(v) if v is not None else NONE  # type: ignore[return-value]
