# duplicate a cached value before handing it to the caller
# so that the caller cannot mutate the cached original.

import copy
from typing import Any, Callable, Dict

COPY_MODES = ("deep", "shallow", "none")


def no_copy(value: Any) -> Any:
    """for immutable results. the cached object itself is returned"""
    return value


_duplicators: Dict[str, Callable[[Any], Any]] = {
    "deep": copy.deepcopy,
    "shallow": copy.copy,
    "none": no_copy,
}


def duplicator_for(mode: str) -> Callable[[Any], Any]:
    if mode not in _duplicators:
        raise ValueError("copy mode must be one of %s, not %r" %
                         (", ".join(COPY_MODES), mode))
    return _duplicators[mode]
