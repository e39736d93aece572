from __future__ import annotations

from pathlib import Path

import click
from flask import Blueprint, current_app

from projectfoam.app.extensions import profiles

cli_bp = Blueprint("cli", __name__, cli_group=None)


def _render(path: str) -> bytes:
    with current_app.test_client() as client:
        resp = client.get(path)
    if resp.status_code != 200:
        raise click.ClickException(f"GET {path} returned {resp.status_code}")
    return resp.data


@cli_bp.cli.command("export-pages")
@click.option("--out", "out_dir", type=click.Path(file_okay=False), default=None, help="Output directory.")
@click.option("--slug", default=None, help="Profile to export (defaults to every known profile).")
def export_pages(out_dir: str | None, slug: str | None) -> None:
    """Write the home and shop pages as static HTML files."""
    root = Path(out_dir or current_app.config["EXPORT_DIR"])
    slugs = [slug] if slug else [p.slug for p in profiles.repository.all()]

    targets = {"index.html": "/"}
    for s in slugs:
        targets[f"shop/{s}/index.html"] = f"/shop/{s}"

    for rel, url in targets.items():
        dest = root / rel
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(_render(url))
        click.echo(f"wrote {dest}")

    current_app.logger.info("Exported %d page(s) to %s", len(targets), root)


@cli_bp.cli.command("list-profiles")
def list_profiles() -> None:
    """Print the slug and name of every known profile."""
    for profile in profiles.repository.all():
        click.echo(f"{profile.slug}\t{profile.name}")
