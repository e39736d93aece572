from __future__ import annotations

import logging

from flask import Blueprint, render_template

from projectfoam.app.common.errors import abort_profile_not_found
from projectfoam.app.extensions import profiles
from projectfoam.modules.shops.views import build_shop_view

logger = logging.getLogger(__name__)

bp = Blueprint("shops", __name__)


@bp.get("/shop", defaults={"slug": None})
@bp.get("/shop/<slug>")
def shop_page(slug: str | None):
    """GET /shop/<slug> - Business profile page."""
    profile = profiles.repository.lookup(slug)
    if profile is None:
        logger.warning("No profile for slug=%r", slug)
        abort_profile_not_found(slug)

    return render_template("pages/shop.html", shop=build_shop_view(profile))
