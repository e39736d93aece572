"""Bundled profile data.

There is no datastore; the shop page always renders this record unless a
different repository is passed to the app factory.
"""

from __future__ import annotations

from projectfoam.app.models import Badge, BadgeVariant, HoursEntry, Review, Service, ShopProfile

WEEKDAY_HOURS = "9:00 AM – 6:00 PM"

PRECISION_AUTO_DETAILING = ShopProfile(
    slug="precision-auto-detailing",
    name="Precision Auto Detailing",
    city="Chantilly, VA",
    address_short="Chantilly, VA",
    is_open=True,
    closes_at="6:00 PM",
    rating=4.9,
    review_count=128,
    response_time="15 minutes",
    badges=(
        Badge("Verified Pro", BadgeVariant.GREEN),
        Badge("Immaculate Reviews", BadgeVariant.BLUE),
        Badge("Mobile Service", BadgeVariant.GRAY),
    ),
    highlights=("Mobile Service", "15 Mile Radius", "Fully Insured", "Eco-Friendly"),
    about=(
        "Over 10 years of experience in premium detailing and ceramic coatings. "
        "We specialize in paint correction, interior deep cleaning and ceramic coatings "
        "to make your car look brand new."
    ),
    serving=("Fairfax", "Chantilly", "Centreville"),
    gallery=(
        "/detail-foam.jpg",
        "/car-detailing-1.jpg",
        "/shine-shop.webp",
        "/interior-steam.webp",
        "/auto-detailing-2.webp",
    ),
    services=(
        Service(
            title="Full Interior Detail",
            price_from=150,
            duration="2–3 Hours",
            bullets=("Deep clean seats & carpets", "Dash & trim detail", "Windows cleaned", "Deodorize"),
        ),
        Service(
            title="Exterior Detail",
            price_from=180,
            duration="2–3 Hours",
            bullets=("Hand wash", "Clay bar (as needed)", "Wax/sealant", "Wheel & tire clean"),
        ),
        Service(
            title="Ceramic Coating",
            price_from=499,
            duration="5+ Hours",
            bullets=("Paint prep", "Long-lasting protection", "High gloss finish", "Aftercare tips"),
        ),
    ),
    reviews=(
        Review(
            name="Sarah P.",
            location="Fairfax, VA",
            stars=5,
            date="Jan 2026",
            text="Amazing job! My car looks brand new!",
            photos=("/images/rev-1a.jpg", "/images/rev-1b.jpg"),
        ),
        Review(
            name="Michael T.",
            location="Chantilly, VA",
            stars=5,
            date="Dec 2025",
            text="Super professional and thorough. Highly recommend!",
            verified=True,
        ),
    ),
    hours=(
        HoursEntry("Mon", WEEKDAY_HOURS),
        HoursEntry("Tue", WEEKDAY_HOURS),
        HoursEntry("Wed", WEEKDAY_HOURS),
        HoursEntry("Thu", WEEKDAY_HOURS),
        HoursEntry("Fri", WEEKDAY_HOURS),
        HoursEntry("Sat", "10:00 AM – 4:00 PM"),
        HoursEntry("Sun", "Closed"),
    ),
)
