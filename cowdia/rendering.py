"""Abstract render windows, renderers and render systems."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cowdia.color import Color


class RenderWindow(ABC):
    """A window that a renderer draws into.

    The base class keeps track of the window size and fullscreen state;
    subclasses do the platform work and call up to keep that state current.
    """

    def __init__(self) -> None:
        self._width = 0
        self._height = 0
        self._fullscreen = False

    def create(self, width: int, height: int) -> bool:
        """Create the window with the given client size; return True on success."""
        self._width = width
        self._height = height
        return True

    @abstractmethod
    def destroy(self) -> None:
        """Destroy the window."""

    @abstractmethod
    def set_title(self, title: str) -> None:
        """Set the window title."""

    def resize(self, width: int, height: int) -> None:
        """Change the client size of the window."""
        self._width = width
        self._height = height

    def set_fullscreen(self, fullscreen: bool) -> None:
        """Switch fullscreen mode on or off."""
        self._fullscreen = fullscreen

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def fullscreen(self) -> bool:
        return self._fullscreen


class Renderer(ABC):
    """Draws frames for a render system."""

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the renderer for drawing."""

    @abstractmethod
    def shutdown(self) -> None:
        """Release everything the renderer holds."""

    @property
    @abstractmethod
    def initialized(self) -> bool:
        """Whether the renderer is ready to draw."""

    @abstractmethod
    def begin_frame(self, color: Color) -> None:
        """Start a frame, clearing the render target to ``color``."""

    @abstractmethod
    def end_frame(self) -> None:
        """Finish and present the frame."""


class RenderSystem(ABC):
    """A rendering back end providing a window, a renderer and an event pump."""

    @abstractmethod
    def initialize(self) -> None:
        """Initialize the render system."""

    @abstractmethod
    def shutdown(self) -> None:
        """Shut the render system down."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The name the render system is registered under."""

    @abstractmethod
    def get_renderer(self) -> Renderer:
        """Return the renderer of this system."""

    @abstractmethod
    def get_render_window(self) -> RenderWindow:
        """Return the render window of this system."""

    @abstractmethod
    def poll_events(self) -> bool:
        """Process one pending event; return True if there was one."""