# src/rpc_kit/rpc/headers.py

from collections.abc import Mapping
from types import MappingProxyType
from typing import Protocol


class HeaderProvider(Protocol):
    """Supplies static request headers.

    Called once during client construction. The result is cached and sent
    as is with every request; the transport may still override or merge
    reserved headers such as Content-Type or User-Agent.
    """

    def get_headers(self) -> Mapping[str, str]: ...


class NoHeaderProvider:
    def get_headers(self) -> Mapping[str, str]:
        return MappingProxyType({})

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NoHeaderProvider)

    def __hash__(self) -> int:
        return hash(NoHeaderProvider)

    def __repr__(self) -> str:
        return "NoHeaderProvider()"


class FixedHeaderProvider:
    """Always returns the same headers.

    The given mapping is copied, so later changes to it are not seen.
    """

    def __init__(self, headers: Mapping[str, str]) -> None:
        seen: dict[str, str] = {}
        for name in headers:
            key = name.lower()
            if key in seen:
                raise ValueError(
                    f"Duplicate header '{name}' (already given as '{seen[key]}')"
                )
            seen[key] = name
        self._headers = MappingProxyType(dict(headers))

    def get_headers(self) -> Mapping[str, str]:
        return self._headers

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedHeaderProvider):
            return NotImplemented
        return dict(self._headers) == dict(other._headers)

    def __hash__(self) -> int:
        return hash(frozenset(self._headers.items()))

    def __repr__(self) -> str:
        return f"FixedHeaderProvider({dict(self._headers)!r})"
