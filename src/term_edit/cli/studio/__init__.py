"""Interactive full-screen editor."""

from term_edit.cli.studio.editor import EditorApp

__all__ = ["EditorApp"]
