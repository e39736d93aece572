"""Map a ShopProfile to what the shop template renders.

Ratings are clamped here, before they reach the star macro.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from projectfoam.app.models import Badge, HoursEntry, Review, Service, ShopProfile

MIN_RATING = 0.0
MAX_RATING = 5.0
THUMBNAIL_LIMIT = 3
CURRENCY_SYMBOL = "$"

TAB_LABELS = ("Overview", "Services", "Reviews", "Gallery", "Location")


@dataclass(frozen=True)
class Tab:
    label: str
    href: str
    active: bool


@dataclass(frozen=True)
class ServiceCard:
    title: str
    duration: str
    price: str
    bullets: Tuple[str, ...]


@dataclass(frozen=True)
class ReviewCard:
    name: str
    location: str
    stars: float
    date: str
    text: str
    verified: bool
    photos: Tuple[str, ...]


@dataclass(frozen=True)
class ShopView:
    name: str
    city: str
    address_short: str
    is_open: bool
    status_label: str
    closes_at: str
    rating: float
    rating_text: str
    review_count: int
    response_time: str
    badges: Tuple[Badge, ...]
    highlights: Tuple[str, ...]
    about: str
    serving: Tuple[str, ...]
    cover: Optional[str]
    thumbnails: Tuple[str, ...]
    photo_count: int
    tabs: Tuple[Tab, ...]
    service_options: Tuple[str, ...]
    services: Tuple[ServiceCard, ...]
    reviews: Tuple[ReviewCard, ...]
    hours: Tuple[HoursEntry, ...]


def clamp_rating(value: float) -> float:
    return max(MIN_RATING, min(MAX_RATING, float(value)))


def format_price(amount: int) -> str:
    return f"{CURRENCY_SYMBOL}{amount}"


def split_gallery(gallery: Tuple[str, ...]) -> Tuple[Optional[str], Tuple[str, ...]]:
    """Cover is the first photo; thumbnails are the next three at most."""
    if not gallery:
        return None, ()
    return gallery[0], tuple(gallery[1 : 1 + THUMBNAIL_LIMIT])


def build_tabs() -> Tuple[Tab, ...]:
    # First tab is always highlighted; there is no scroll tracking.
    return tuple(
        Tab(label=label, href=f"#{label.lower()}", active=idx == 0)
        for idx, label in enumerate(TAB_LABELS)
    )


def service_card(service: Service) -> ServiceCard:
    return ServiceCard(
        title=service.title,
        duration=service.duration,
        price=format_price(service.price_from),
        bullets=tuple(service.bullets),
    )


def review_card(review: Review) -> ReviewCard:
    return ReviewCard(
        name=review.name,
        location=review.location,
        stars=clamp_rating(review.stars),
        date=review.date,
        text=review.text,
        verified=bool(review.verified),
        photos=tuple(review.photos or ()),
    )


def build_shop_view(profile: ShopProfile) -> ShopView:
    rating = clamp_rating(profile.rating)
    cover, thumbnails = split_gallery(profile.gallery)
    services: List[ServiceCard] = [service_card(s) for s in profile.services]

    return ShopView(
        name=profile.name,
        city=profile.city,
        address_short=profile.address_short,
        is_open=profile.is_open,
        status_label="Open" if profile.is_open else "Closed",
        closes_at=profile.closes_at,
        rating=rating,
        rating_text=f"{rating:.1f}",
        review_count=profile.review_count,
        response_time=profile.response_time,
        badges=tuple(profile.badges),
        highlights=tuple(profile.highlights),
        about=profile.about,
        serving=tuple(profile.serving),
        cover=cover,
        thumbnails=thumbnails,
        photo_count=len(profile.gallery),
        tabs=build_tabs(),
        service_options=tuple(s.title for s in profile.services),
        services=tuple(services),
        reviews=tuple(review_card(r) for r in profile.reviews),
        hours=tuple(profile.hours),
    )
