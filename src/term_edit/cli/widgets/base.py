"""Base widget protocol and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from term_edit.core.session import EditorSession


@dataclass
class Rect:
    """Rectangle bounds for widget positioning."""
    x: int
    y: int
    width: int
    height: int


@runtime_checkable
class Widget(Protocol):
    """Protocol for screen widgets."""

    def render(self, bounds: Rect) -> list[str]:
        """Render widget content as list of lines."""
        ...


class BaseWidget(ABC):
    """Base class for widgets that draw part of an editor session."""

    def __init__(self, session: EditorSession) -> None:
        self._session = session

    @property
    def session(self) -> EditorSession:
        return self._session

    @abstractmethod
    def render(self, bounds: Rect) -> list[str]:
        """Subclasses must implement rendering."""
        pass
