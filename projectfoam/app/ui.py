"""Presentational helpers shared by the page templates.

The macros in `templates/components.html` stay dumb: every decision they make
(which classes, how many stars are filled, which image loading hints) is taken
here so it can be tested without rendering HTML.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Union

from flask import Flask

from projectfoam.app.assets import asset_url, image_attrs
from projectfoam.app.models import BadgeVariant

STAR_COUNT = 5

BADGE_STYLES: Dict[BadgeVariant, str] = {
    BadgeVariant.GREEN: "bg-emerald-50 text-emerald-700 ring-emerald-200",
    BadgeVariant.BLUE: "bg-blue-50 text-blue-700 ring-blue-200",
    BadgeVariant.GRAY: "bg-slate-50 text-slate-700 ring-slate-200",
}

BUTTON_BASE = (
    "inline-flex items-center justify-center gap-2 rounded-xl px-4 py-3 text-sm font-semibold "
    "transition focus:outline-none focus:ring-2 focus:ring-slate-400 focus:ring-offset-2"
)
BUTTON_STYLES: Dict[str, str] = {
    "primary": "bg-blue-600 text-white hover:bg-blue-700",
    "secondary": "bg-white text-slate-900 ring-1 ring-slate-300 hover:bg-slate-50",
    "ghost": "bg-transparent text-slate-700 hover:bg-slate-100",
}
BUTTON_TYPES = ("button", "submit")

FIELD_CLASSES = (
    "w-full rounded-xl border border-slate-200 bg-white px-3 py-3 text-sm text-slate-900 "
    "focus:border-slate-400 focus:outline-none focus:ring-2 focus:ring-slate-200"
)
INPUT_CLASSES = FIELD_CLASSES + " placeholder:text-slate-400"

CARD_CLASSES = "rounded-2xl bg-white shadow-sm ring-1 ring-slate-200"


def cn(*classes: Optional[Union[str, bool]]) -> str:
    """Join the truthy class names with single spaces."""
    return " ".join(c for c in classes if c)


def round_half_up(value: float) -> int:
    # round() rounds halves to even; 2.5 must give 3 here.
    return int(math.floor(value + 0.5))


def star_states(value: float) -> List[bool]:
    """Filled/empty flag for each of the five star icons.

    Defined for any number: values below 0 fill nothing, 5 and above fill
    all, NaN fills nothing.
    """
    if math.isnan(value):
        return [False] * STAR_COUNT
    full = round_half_up(max(0.0, min(float(STAR_COUNT), value)))
    return [i < full for i in range(STAR_COUNT)]


def star_classes(filled: bool) -> str:
    return cn("h-4 w-4", "text-amber-400" if filled else "text-slate-200")


def badge_classes(variant: Union[BadgeVariant, str]) -> str:
    return BADGE_STYLES[BadgeVariant.coerce(variant)]


def button_classes(variant: str = "primary", extra: Optional[str] = None) -> str:
    styles = BUTTON_STYLES.get(variant, BUTTON_STYLES["primary"])
    return cn(BUTTON_BASE, styles, extra)


def button_type(kind: str = "button") -> str:
    return kind if kind in BUTTON_TYPES else "button"


def card_classes(extra: Optional[str] = None) -> str:
    return cn(CARD_CLASSES, extra)


def register_ui(app: Flask) -> None:
    """Expose the helpers to every template."""
    app.jinja_env.globals.update(
        cn=cn,
        star_states=star_states,
        star_classes=star_classes,
        badge_classes=badge_classes,
        button_classes=button_classes,
        button_type=button_type,
        card_classes=card_classes,
        input_classes=INPUT_CLASSES,
        field_classes=FIELD_CLASSES,
        asset_url=asset_url,
        image_attrs=image_attrs,
    )
