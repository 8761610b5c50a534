"""Auto arrays: sequences mixing literal values with per-index generators.

``[a, b, fn]`` expanded to length 5 gives ``[a, b, fn(2), fn(3), fn(4)]``:
the generator slot replaces itself and fills the gap up to the target length.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable, TypeVar, Union

from pi.table.errors import AutoArrayLengthError

T = TypeVar("T")

AutoArray = Sequence[Union[T, Callable[[int], T]]]


def is_generator(item: object) -> bool:
    return callable(item)


def has_generator(auto_array: Sequence[object]) -> bool:
    return any(is_generator(item) for item in auto_array)


def expand_auto_array(auto_array: AutoArray[T], to_length: int) -> list[T]:
    """Expand *auto_array* to *to_length* items.

    Every generator slot expands independently, so an array with more than
    one generator comes back longer than *to_length*; callers compare the
    result length when that matters.  Raises :class:`AutoArrayLengthError`
    when a purely literal array is longer than *to_length* or when a
    generator would have to produce a negative number of values.
    """
    items = list(auto_array)
    generative = has_generator(items)
    if not generative and to_length < len(items):
        raise AutoArrayLengthError(len(items), to_length)

    # +1 because the generator occupies one of the slots itself
    to_generate = to_length - len(items) + 1
    if generative and to_generate < 0:
        raise AutoArrayLengthError(len(items), to_length)

    result: list[T] = []
    for idx, item in enumerate(items):
        if not is_generator(item):
            result.append(item)  # type: ignore[arg-type]
            continue
        fn: Callable[[int], T] = item  # type: ignore[assignment]
        result.extend(fn(idx + offset) for offset in range(to_generate))
    return result
