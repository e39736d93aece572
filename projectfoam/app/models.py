from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

logger = logging.getLogger(__name__)


class BadgeVariant(str, Enum):
    GREEN = "green"
    BLUE = "blue"
    GRAY = "gray"

    @classmethod
    def coerce(cls, value) -> "BadgeVariant":
        """Return the matching variant, or GRAY for anything unrecognised."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.warning("Unknown badge variant %r, falling back to %s", value, cls.GRAY.value)
            return cls.GRAY


@dataclass(frozen=True)
class Badge:
    label: str
    variant: BadgeVariant = BadgeVariant.GRAY


@dataclass(frozen=True)
class Service:
    title: str
    price_from: int  # whole dollars
    duration: str
    bullets: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Review:
    name: str
    location: str
    stars: float  # 0..5
    date: str
    text: str
    verified: bool = False
    photos: Tuple[str, ...] = ()


@dataclass(frozen=True)
class HoursEntry:
    day: str
    hours: str


@dataclass(frozen=True)
class ShopProfile:
    """A service business as shown on its profile page.

    `gallery[0]` is the cover photo; the rest are thumbnails.
    """

    slug: str
    name: str
    city: str
    address_short: str
    is_open: bool
    closes_at: str
    rating: float  # 0.0..5.0
    review_count: int
    response_time: str
    badges: Tuple[Badge, ...] = ()
    highlights: Tuple[str, ...] = ()
    about: str = ""
    serving: Tuple[str, ...] = ()
    gallery: Tuple[str, ...] = ()
    services: Tuple[Service, ...] = ()
    reviews: Tuple[Review, ...] = ()
    hours: Tuple[HoursEntry, ...] = field(default_factory=tuple)
