"""Display helpers for the CLI."""

from segpath.ui.cli.display.path_display import PathDisplay

__all__ = ["PathDisplay"]
