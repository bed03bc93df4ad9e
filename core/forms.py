"""Forms for the gallery controls."""

from __future__ import annotations

from django import forms

MAX_SEED = 2**32 - 1


class GalleryControlsForm(forms.Form):
    """Validate the `?seed=` query parameter behind the "Refresh data" button."""

    seed = forms.IntegerField(
        required=False,
        min_value=0,
        max_value=MAX_SEED,
        label="Seed",
        help_text="Mock data stream; the same seed always renders the same charts.",
    )

    def seed_or_default(self, default: int) -> int:
        """Return the validated seed, or `default` when absent or invalid.

        Args:
            default: Seed used when the form is unbound, empty or invalid.

        Returns:
            The seed to render with.
        """

        if not self.is_bound or not self.is_valid():
            return default
        seed = self.cleaned_data.get("seed")
        return default if seed is None else int(seed)


def next_seed(seed: int) -> int:
    """Return the seed after `seed`, wrapping to 0 past MAX_SEED."""

    return (seed + 1) % (MAX_SEED + 1)
