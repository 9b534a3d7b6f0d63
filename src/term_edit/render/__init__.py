"""Frame rendering for the editor screen."""

from term_edit.render.frame import FrameBuffer, ScreenRenderer

__all__ = ["FrameBuffer", "ScreenRenderer"]
