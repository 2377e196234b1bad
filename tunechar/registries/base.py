from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterable, Iterator, Optional, Sequence, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Registry(Generic[K, V]):
    """Keyed lookup table with an optional fallback value.

        EXTRACTORS = Registry[str, Callable[..., dict]](_name="extractors")

        @EXTRACTORS.register("lasso", "enet")
        def linear(model): ...

        EXTRACTORS.resolve(["lasso", "linear"])  # first hit, else the fallback

    A later registration under the same key replaces the earlier one.
    """

    _entries: Dict[K, V] = field(default_factory=dict)
    _name: str = "registry"
    _fallback: Optional[V] = None

    def register(self, *keys: K) -> Callable[[V], V]:
        def deco(value: V) -> V:
            self._entries.update(dict.fromkeys(keys, value))
            return value

        return deco

    def set_default(self, value: V) -> V:
        self._fallback = value
        return value

    def get(self, key: K) -> V:
        try:
            return self._entries[key]
        except KeyError:
            raise KeyError(f"{self._name}: nothing registered for {key!r}") from None

    def try_get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._entries.get(key, default)

    def resolve(self, keys: Sequence[Optional[K]]) -> Optional[V]:
        hit = next((k for k in keys if k is not None and k in self._entries), None)
        return self._fallback if hit is None else self._entries[hit]

    def keys(self) -> Iterable[K]:
        return self._entries.keys()

    def __contains__(self, key: K) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)
