"""Request headers as the matcher sees them.

Built once per request from the raw ASGI byte pairs. Names are folded to
lowercase up front, so every lookup afterwards is a dict hit.
"""

from collections.abc import Iterator, Mapping


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive view over a request's headers.

    Indexing returns the first value the client sent for a name, which
    is the value a stub's header requirement is compared against.
    """

    __slots__ = ("_first",)

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        first: dict[str, str] = {}
        for name, value in raw:
            first.setdefault(name.decode("latin-1").lower(), value.decode("latin-1"))
        self._first = first

    def __getitem__(self, key: str) -> str:
        try:
            return self._first[key.lower()]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._first

    def __iter__(self) -> Iterator[str]:
        return iter(self._first)

    def __len__(self) -> int:
        return len(self._first)

    def __repr__(self) -> str:
        return f"Headers({self._first!r})"
