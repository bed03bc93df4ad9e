"""Render the gallery from the command line and report failures."""

from __future__ import annotations

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone

from core.charting.gallery import GALLERY_ENTRY_BY_SLUG, GALLERY_SECTIONS, chart_count, iter_entries
from core.charting.render import render_entry
from core.charting.validator import validate_gallery
from core.forms import GalleryControlsForm
from mockdata.gallery_data import build_gallery_data


class Command(BaseCommand):
    """Render every card (or one card) and print its interactive shape count."""

    help = "Render gallery charts for a seed and fail when any chart cannot be drawn."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "--seed",
            type=int,
            default=None,
            help="Mock data seed (defaults to GALLERY_DEFAULT_SEED).",
        )
        parser.add_argument(
            "--chart",
            default=None,
            help="Render only the card with this slug.",
        )
        parser.add_argument(
            "--check",
            action="store_true",
            help="Validate the gallery catalog without rendering.",
        )

    def _seed(self, raw: int | None) -> int:
        """Validate `--seed` with the same bounds as the gallery form."""

        if raw is None:
            return settings.GALLERY_DEFAULT_SEED
        form = GalleryControlsForm({"seed": raw})
        if not form.is_valid():
            raise CommandError(f"Invalid --seed {raw}: " + " ".join(form.errors["seed"]))
        return form.seed_or_default(settings.GALLERY_DEFAULT_SEED)

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        seed = self._seed(options["seed"])
        slug: str | None = options["chart"]

        result = validate_gallery(GALLERY_SECTIONS)
        for warning in result.warnings:
            self.stderr.write(f"warning: {warning}")
        if not result.is_valid:
            raise CommandError("Invalid gallery catalog:\n" + "\n".join(result.errors))
        if options["check"]:
            self.stdout.write(f"[CHECK] {chart_count()} charts OK")
            return None

        if slug is not None:
            entry = GALLERY_ENTRY_BY_SLUG.get(slug)
            if entry is None:
                raise CommandError(f"Unknown chart slug: {slug}")
            entries = [entry]
        else:
            entries = list(iter_entries())

        data = build_gallery_data(
            seed=seed,
            today=timezone.localdate(),
            large_scatter_points=settings.GALLERY_LARGE_SCATTER_POINTS,
        )
        failed: list[str] = []
        for entry in entries:
            chart = render_entry(entry, data=data)
            if chart.error:
                failed.append(f"{entry.slug}: {chart.error}")
                self.stdout.write(f"{entry.slug} FAILED")
                continue
            self.stdout.write(f"{entry.slug} shapes={chart.shape_count}")

        if failed:
            raise CommandError(f"{len(failed)} chart(s) failed to render:\n" + "\n".join(failed))
        self.stdout.write(f"[seed={seed}] rendered {len(entries)} charts")
        return None
