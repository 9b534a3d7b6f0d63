"""Message bar: the latest status message while it is fresh."""

from __future__ import annotations

import time
from typing import Callable

from term_edit.core.session import EditorSession
from term_edit.cli.widgets.base import BaseWidget, Rect


class MessageBarWidget(BaseWidget):
    """Shows the session's status message until it times out."""

    def __init__(
        self,
        session: EditorSession,
        clock: Callable[[], float] = time.time,
    ) -> None:
        super().__init__(session)
        self._clock = clock

    def render(self, bounds: Rect) -> list[str]:
        status = self.session.status
        if status.visible(self._clock(), self.session.config.message_timeout):
            return [status.text[:bounds.width]]
        return [""]
