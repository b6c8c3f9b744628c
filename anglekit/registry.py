"""Static class tag table for the library's core types.

Each core type carries a small integer tag used by display tooling. Tags are
recorded in ``CLASS_TAGS`` when the ``special_class`` decorator runs at import
time; they have no effect on the behavior of the tagged type.

Example:
    >>> @special_class(7)
    ... class Widget:
    ...     pass
    >>> class_tag(Widget)
    7
    >>> class_tag(Widget())
    7
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T", bound=type)

CLASS_TAGS: dict[type, int] = {}


def special_class(tag: int) -> Callable[[T], T]:
    """Return a class decorator that records ``tag`` for the decorated class.

    Args:
        tag: Integer identifier for the class.

    Raises:
        TypeError: If ``tag`` is not an integer.
        ValueError: If the class is already registered with a different tag.
    """
    if isinstance(tag, bool) or not isinstance(tag, int):
        raise TypeError(f"class tag must be an int, got {type(tag).__name__}")

    def register(cls: T) -> T:
        existing = CLASS_TAGS.get(cls)
        if existing is not None and existing != tag:
            raise ValueError(f"{cls.__name__} is already tagged {existing}")
        CLASS_TAGS[cls] = tag
        return cls

    return register


def class_tag(obj: object) -> int:
    """Return the tag of a registered class or of an instance's class.

    Raises:
        KeyError: If the type was never registered.
    """
    cls = obj if isinstance(obj, type) else type(obj)
    try:
        return CLASS_TAGS[cls]
    except KeyError:
        raise KeyError(f"{cls.__name__} has no class tag") from None


def tagged_classes() -> list[tuple[type, int]]:
    """Return ``(class, tag)`` pairs ordered by tag."""
    return sorted(CLASS_TAGS.items(), key=lambda item: item[1])
