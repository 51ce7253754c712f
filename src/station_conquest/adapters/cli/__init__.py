"""Command line presentation adapters."""

from station_conquest.adapters.cli.text_presenter import (
    CONQUERED_BANNER,
    TextPresenter,
    render_snapshot,
)

__all__ = ["CONQUERED_BANNER", "TextPresenter", "render_snapshot"]
