"""The engine and the application interface it runs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import ExitStack

from cowdia.exceptions import EngineError, EngineRuntimeError
from cowdia.log import LogLevel, LogManager, log, log_exception
from cowdia.plugin import PluginManager
from cowdia.rendering import RenderSystem
from cowdia.scene import SceneManager
from cowdia.singleton import Singleton


class Application(ABC):
    """An application run by the engine."""

    @abstractmethod
    def on_initialize(self) -> None:
        """Called before the main loop starts."""

    @abstractmethod
    def on_shutdown(self) -> None:
        """Called after the main loop ends."""


class Engine(Singleton):
    """Owns the managers, the render systems and the main loop."""

    def __init__(self) -> None:
        with ExitStack() as stack:
            super().__init__()
            stack.callback(self.release)
            self.log_manager = LogManager()
            stack.callback(self.log_manager.release)
            self.plugin_manager = PluginManager()
            stack.callback(self.plugin_manager.release)
            self.scene_manager = SceneManager()
            stack.pop_all()

        self._debug = False
        self._running = False
        self._current: RenderSystem | None = None
        self._render_systems: dict[str, RenderSystem] = {}

    @property
    def debug(self) -> bool:
        return self._debug

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def render_system(self) -> RenderSystem | None:
        """The render system in use."""
        return self._current

    def set_debug_mode(self, value: bool) -> None:
        """Turn debug mode on or off; in debug mode ``run`` re-raises errors."""
        if self._running:
            raise EngineRuntimeError("cannot set debug mode while engine is running.")
        self._debug = value

    def register_render_system(self, render_system: RenderSystem) -> None:
        """Make ``render_system`` available under its name."""
        name = render_system.name
        if name in self._render_systems:
            raise ValueError(f"render system {name} is already registered")
        self._render_systems[name] = render_system
        log(LogLevel.INFO, f"RenderSystem {name} was registered")

    def unregister_render_system(self, render_system: RenderSystem) -> None:
        """Remove the render system registered under the name of ``render_system``."""
        name = render_system.name
        self._render_systems.pop(name, None)
        log(LogLevel.INFO, f"RenderSystem {name} was unregistered")

    def get_render_system_by_name(self, name: str) -> RenderSystem | None:
        """Return the render system registered as ``name``, or ``None``."""
        return self._render_systems.get(name)

    def set_render_system(self, render_system: RenderSystem) -> None:
        """Use ``render_system`` for rendering."""
        if self._running:
            raise EngineRuntimeError("cannot change render system while engine is running.")
        self._current = render_system
        self.scene_manager.set_render_system(render_system)
        log(LogLevel.INFO, f"RenderSystem is changed to {render_system.name}")

    def run(self, app: Application) -> None:
        """Initialize ``app``, run the main loop until stopped, then shut it down.

        Engine errors are logged; in debug mode they are raised again.
        """
        try:
            app.on_initialize()

            if self._current is None:
                raise EngineRuntimeError("render system not found")

            renderer = self._current.get_renderer()
            if not renderer.initialized:
                raise EngineRuntimeError("renderer is not initialized")

            self._running = True
            log(LogLevel.INFO, "Engine starts to run")

            while self._running:
                if not self._current.poll_events():
                    self.scene_manager.process_frame()

            log(LogLevel.INFO, "Engine stopped")

            app.on_shutdown()
        except EngineError as error:
            log_exception(error)
            if self._debug:
                raise

    def stop(self) -> None:
        """Ask the main loop to end."""
        self._running = False

    def close(self) -> None:
        """Shut down the managers and release the engine."""
        self._running = False
        self.scene_manager.close()
        self.plugin_manager.close()
        self.log_manager.release()
        self.release()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()