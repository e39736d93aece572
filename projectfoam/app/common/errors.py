from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class PageError(Exception):
    """Raise from a view to render the shared error page."""

    status_code: int
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None

    @property
    def title(self) -> str:
        return self.code.replace("_", " ").capitalize()


def abort_page(status_code: int, code: str, message: str, details: Optional[Dict[str, Any]] = None) -> None:
    """Convenience wrapper."""
    raise PageError(status_code=status_code, code=code, message=message, details=details)


def abort_profile_not_found(slug: Optional[str]) -> None:
    abort_page(404, "profile_not_found", "We couldn't find that business.", {"slug": slug})
