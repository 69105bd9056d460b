"""Scenes and the scene manager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from cowdia.color import Color
from cowdia.exceptions import EngineRuntimeError
from cowdia.log import LogLevel, log
from cowdia.rendering import Renderer, RenderSystem
from cowdia.singleton import Singleton


class Scene(ABC):
    """A scene; ``clear_color`` is the colour each frame is cleared to."""

    clear_color: Color = Color()

    @abstractmethod
    def on_load(self) -> None:
        """Called when the scene becomes the current scene."""

    @abstractmethod
    def on_unload(self) -> None:
        """Called when the scene stops being the current scene."""


class SceneManager(Singleton):
    """Holds the registered scenes and draws the current one."""

    def __init__(self) -> None:
        super().__init__()
        self._render_system: RenderSystem | None = None
        self._renderer: Renderer | None = None
        self._scenes: dict[str, Scene] = {}
        self._current: Scene | None = None

    @property
    def current_scene(self) -> Scene | None:
        return self._current

    @property
    def render_system(self) -> RenderSystem | None:
        return self._render_system

    @property
    def renderer(self) -> Renderer | None:
        return self._renderer

    def register_scene(self, name: str, scene_type: type[Scene], *args: Any, **kwargs: Any) -> Scene:
        """Create a scene of ``scene_type`` and register it under ``name``."""
        scene = scene_type(*args, **kwargs)
        self._scenes[name] = scene
        return scene

    def load_scene(self, name: str) -> None:
        """Make the scene ``name`` current; logs a warning if there is none."""
        scene = self._scenes.get(name)
        if scene is None:
            log(LogLevel.WARNING, f"Cannot find scene named {name}")
            return

        if self._current is not None:
            self._current.on_unload()

        self._current = scene
        scene.on_load()

        log(LogLevel.INFO, f"Scene {name} is loaded")

    def unload_scene(self) -> None:
        """Unload the current scene, if any."""
        if self._current is not None:
            self._current.on_unload()
        self._current = None

    def process_frame(self) -> None:
        """Draw one frame of the current scene; does nothing without one."""
        if self._current is None:
            return
        if self._renderer is None:
            raise EngineRuntimeError("no render system set")

        self._renderer.begin_frame(self._current.clear_color)
        self._renderer.end_frame()

    def set_render_system(self, render_system: RenderSystem) -> None:
        """Draw with the renderer of ``render_system`` from now on."""
        self._render_system = render_system
        self._renderer = render_system.get_renderer()

    def close(self) -> None:
        """Drop every scene and release the manager."""
        self._scenes.clear()
        self._current = None
        self.release()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()