from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional


class AuthorMap:
    """Read-only lookup from Drupal user names to Jekyll author ids.

    Names absent from the mapping are passed through unchanged.
    """

    def __init__(self, mapping: Optional[Mapping[str, str]] = None) -> None:
        self._mapping = MappingProxyType(dict(mapping or {}))

    @property
    def mapping(self) -> Mapping[str, str]:
        return self._mapping

    def resolve(self, name: Optional[str]) -> Optional[str]:
        if name is None:
            return None
        return self._mapping.get(name, name)

    def __len__(self) -> int:
        return len(self._mapping)
