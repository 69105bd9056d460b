"""Plugins, plugin libraries and the plugin manager."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping

from cowdia.log import LogLevel, log
from cowdia.singleton import Singleton

PluginProc = Callable[[], None]

LOAD_PROC = "on_plugin_load"
UNLOAD_PROC = "on_plugin_unload"

_libraries: dict[str, dict[str, PluginProc]] = {}


class Plugin(ABC):
    """An extension installed into the engine."""

    @abstractmethod
    def on_installed(self) -> None:
        """Called when the plugin is installed."""

    @abstractmethod
    def on_uninstalled(self) -> None:
        """Called when the plugin is uninstalled."""


class PluginError(RuntimeError):
    """Raised when a plugin library cannot be loaded or unloaded."""


def register_library(name: str, procs: Mapping[str, PluginProc]) -> None:
    """Make a plugin library with the given procedures available under ``name``."""
    _libraries[name] = dict(procs)


def unregister_library(name: str) -> None:
    """Remove the plugin library registered under ``name``."""
    try:
        del _libraries[name]
    except KeyError:
        raise KeyError(f"no plugin library named {name!r}") from None


class PluginAssembly:
    """A named plugin library that can be loaded and queried for procedures."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._procs: dict[str, PluginProc] | None = None

    @property
    def loaded(self) -> bool:
        return self._procs is not None

    def load(self) -> None:
        """Load the library; raises ``PluginError`` if it cannot be found."""
        if self._procs is not None:
            raise PluginError(f"plugin already loaded: {self.name}")
        procs = _libraries.get(self.name)
        if procs is None:
            raise PluginError(f"cannot load plugin: {self.name}")
        self._procs = dict(procs)

    def unload(self) -> None:
        """Unload the library; raises ``PluginError`` if it is not loaded."""
        if self._procs is None:
            raise PluginError(f"cannot unload plugin: {self.name}")
        self._procs = None

    def get_proc(self, proc_name: str) -> PluginProc | None:
        """Return the named procedure, or ``None`` if the library lacks it."""
        if self._procs is None:
            raise PluginError(f"plugin not loaded: {self.name}")
        return self._procs.get(proc_name)


class PluginManager(Singleton):
    """Loads plugin libraries and keeps track of installed plugins."""

    def __init__(self) -> None:
        super().__init__()
        self._plugins: list[Plugin] = []
        self._assemblies: dict[str, PluginAssembly] = {}

    @property
    def plugins(self) -> tuple[Plugin, ...]:
        return tuple(self._plugins)

    @property
    def loaded_libraries(self) -> tuple[str, ...]:
        return tuple(self._assemblies)

    def load(self, name: str) -> None:
        """Load the library ``name`` and run its load procedure; no-op if loaded."""
        if name in self._assemblies:
            return

        assembly = PluginAssembly(name)
        assembly.load()

        proc = assembly.get_proc(LOAD_PROC)
        if proc is None:
            assembly.unload()
            raise PluginError(f"plugin {name} has no {LOAD_PROC} procedure")

        self._assemblies[name] = assembly
        proc()

        log(LogLevel.INFO, f"Plugin loaded {name}")

    def unload(self, name: str) -> None:
        """Run the unload procedure of ``name`` and unload it; no-op if not loaded."""
        assembly = self._assemblies.get(name)
        if assembly is None:
            return

        proc = assembly.get_proc(UNLOAD_PROC)
        if proc is not None:
            proc()

        assembly.unload()
        del self._assemblies[name]

        log(LogLevel.INFO, f"Plugin unloaded {name}")

    def install(self, plugin: Plugin) -> None:
        """Install ``plugin``; raises ``ValueError`` if it is already installed."""
        if any(p is plugin for p in self._plugins):
            raise ValueError("plugin is already installed")
        self._plugins.append(plugin)
        plugin.on_installed()

    def uninstall(self, plugin: Plugin) -> None:
        """Notify ``plugin`` and remove it from the installed plugins."""
        plugin.on_uninstalled()
        self._plugins = [p for p in self._plugins if p is not plugin]

    def close(self) -> None:
        """Uninstall every plugin, unload every library and release the manager."""
        plugins, self._plugins = self._plugins, []
        for plugin in plugins:
            plugin.on_uninstalled()

        assemblies, self._assemblies = self._assemblies, {}
        for assembly in assemblies.values():
            assembly.unload()

        self.release()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()