from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Protocol

from projectfoam.app.fixtures import PRECISION_AUTO_DETAILING
from projectfoam.app.models import ShopProfile


class ProfileRepository(Protocol):
    def lookup(self, slug: Optional[str]) -> Optional[ShopProfile]:
        ...

    def all(self) -> List[ShopProfile]:
        ...


class StaticProfileRepository:
    """Always returns the same profile, whatever slug is asked for."""

    def __init__(self, profile: ShopProfile = PRECISION_AUTO_DETAILING):
        self._profile = profile

    def lookup(self, slug: Optional[str]) -> Optional[ShopProfile]:
        return self._profile

    def all(self) -> List[ShopProfile]:
        return [self._profile]


class InMemoryProfileRepository:
    """Slug-keyed lookup; unknown slugs resolve to None."""

    def __init__(self, profiles: Iterable[ShopProfile] = ()):
        self._by_slug: Dict[str, ShopProfile] = {p.slug: p for p in profiles}

    def lookup(self, slug: Optional[str]) -> Optional[ShopProfile]:
        if not slug:
            return None
        return self._by_slug.get(slug)

    def all(self) -> List[ShopProfile]:
        return list(self._by_slug.values())
