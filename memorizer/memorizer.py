# cache the result of a single argument function, keyed by the argument value.
# the function must be deterministic. a cached value is never recomputed.
#
# not thread safe: the hit check and the insert are not atomic.

import types
from typing import TYPE_CHECKING, Any, Callable, Dict, Generic, Hashable, TypeVar

from .copy_policy import duplicator_for
from .stats import MemorizerStats

if TYPE_CHECKING:
    from memorizer_config import MemorizerConfig

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Memorizer(Generic[K, V]):
    """Memoizing wrapper of a function taking exactly one argument.

    Arguments must be hashable, and equal arguments must hash equal for as
    long as they stay in the cache. Returned values are duplicated according
    to copy_mode ("deep", "shallow" or "none") so that mutating a returned
    value does not corrupt the cached one.
    """

    def __init__(self, computation: Callable[[K], V], copy_mode: str = "deep", verbose: bool = False):
        if not callable(computation):
            raise TypeError("computation must be callable, not %r" %
                            (computation, ))
        self.computation = computation
        self.copy_mode = copy_mode
        self.duplicate = duplicator_for(copy_mode)
        self.verbose = verbose
        self.stats = MemorizerStats()
        self.cache: Dict[K, V] = {}

    @property
    def name(self) -> str:
        return getattr(self.computation, "__name__", repr(self.computation))

    def value(self, argument: K) -> V:
        if argument in self.cache:  # cache hit
            self.stats.hits += 1
            self.trace("cache hit", argument)
            return self.duplicate(self.cache[argument])

        self.stats.misses += 1
        self.trace("cache miss", argument)
        try:
            result = self.computation(argument)
        except Exception:
            # nothing is recorded, the next call with this argument computes again
            self.stats.failures += 1
            self.trace("computation failed", argument)
            raise
        self.cache[argument] = result
        return self.duplicate(result)

    __call__ = value

    # used as a method decorator, the instance itself is the argument
    def __get__(self, instance, owner):
        return self if instance is None else types.MethodType(self, instance)

    def trace(self, event: str, argument: Any) -> None:
        if self.verbose:
            print("memorizer %s: %s key=%r" % (self.name, event, argument))

    def __contains__(self, argument: Any) -> bool:
        return argument in self.cache

    def __len__(self) -> int:
        return len(self.cache)

    def __repr__(self) -> str:
        return "Memorizer(computation=%s, copy_mode=%s, entries=%d)" % (
            self.name, self.copy_mode, len(self.cache))

    @classmethod
    def from_config(cls, computation: Callable[[K], V], config: "MemorizerConfig") -> "Memorizer[K, V]":
        return cls(computation, copy_mode=config.copy_mode, verbose=config.verbose)


def memorizer(f: Callable[[K], V]) -> Memorizer[K, V]:
    """decorator form of Memorizer with the default settings"""
    return Memorizer(f)
