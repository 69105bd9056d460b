# cowdia

A small game engine core for Python, with no dependencies outside the standard library.

- **Math**: `Vector2`, `Vector3` and `Vector4` (`cowdia.vector`), the 4×4 `Matrix`
  (`cowdia.matrix`), `Quaternion` (`cowdia.quaternion`), and the angle types `Radian` and
  `Degree` (`cowdia.angle`).
- **Types**: `Color`, a packed `0xRRGGBBAA` value (`cowdia.color`), and `Rect` (`cowdia.rect`).
- **Core**: `Singleton` (`cowdia.singleton`), the `EngineError` exception family
  (`cowdia.exceptions`), `LogManager` with stream and file handlers (`cowdia.log`), and
  `PluginManager` with named plugin libraries (`cowdia.plugin`).
- **Game loop**: the abstract `RenderSystem`, `Renderer` and `RenderWindow`
  (`cowdia.rendering`), `Scene` and `SceneManager` (`cowdia.scene`), and `Engine`, which
  runs an `Application` (`cowdia.engine`).

## Install

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Math

```python
from cowdia.vector import Vector2, Vector3
from cowdia.matrix import Matrix
from cowdia.quaternion import Quaternion
from cowdia.angle import Degree

a = Vector2(1.0, 2.0)
b = Vector2(3.0, 4.0)
print((a + b).x, b.length(), a.dot(b))       # 4.0 5.0 11.0

c = Vector3(1.0, 3.0, 4.0).cross(Vector3(2.0, 7.0, -5.0))
print(c.x, c.y, c.z)                          # -43.0 13.0 1.0

m = Matrix.identity() * 2
print(m[0, 0], m.transpose()[1, 1])           # 2.0 2.0

q = Quaternion.identity() * Quaternion.euler(0.0, 0.0, 0.0)
print(q.length())                             # 1.0

print(Degree(90.0).to_radian().value)         # about 1.5708
```

Vectors support `+` and `-` with another vector of the same dimension or with a number,
and `*` and `/` with a number, plus the in-place forms. Mixing dimensions raises
`ValueError`. Matrices take up to 16 elements in row-major order, with missing ones set
to zero. They are indexed as `m[row, column]` and support `+`, `-`, `*` with matrices and
numbers on either side, and `/` by a number. `*` between two matrices is the matrix product.

## Colors and rectangles

```python
from cowdia.color import Color
from cowdia.rect import Rect

c = Color.from_rgba(171, 242, 0, 255)
print(hex(c.rgba), c.r, c.g, c.b, c.a)        # 0xabf200ff 171 242 0 255
print(Color(0x6799FFFF) == Color.from_rgba(103, 153, 255))   # True

r = Rect.from_size(680, 480)
print(r.right, r.bottom)                      # 680 480
```

`Color()` is opaque white.

## Logging

```python
from cowdia.log import LogManager, LogLevel

manager = LogManager()
manager.add_standard_output()
manager.log(LogLevel.INFO, "Engine starts to run")
```

Each line reads `[year-month-day hour:minute:second] (LEVEL) message` in local time. The
levels are `DEBUG`, `INFO`, `WARNING` and `ERROR`. The manager also has
`add_standard_error()`, `add_file_output(filename)`, which appends to the file, and
`add_handler(handler)` for any `LogHandler` subclass. The module-level functions `log` and
`log_exception` go through the live `LogManager` and do nothing when there is none.

`LogManager`, `PluginManager`, `SceneManager` and `Engine` are singletons. Each class may
have one live instance at a time, which `get()` returns. A second instance raises
`RuntimeError` until the first calls `release()`.

## Plugins

A plugin library is a set of named procedures registered in-process with
`register_library`. `PluginManager.load(name)` calls its `on_plugin_load` procedure, and
`unload(name)` calls its `on_plugin_unload` procedure if it has one. A procedure usually
installs or uninstalls a `Plugin` object:

```python
from cowdia.plugin import Plugin, PluginManager, register_library

class Hello(Plugin):
    def on_installed(self): print("installed")
    def on_uninstalled(self): print("uninstalled")

manager = PluginManager()
hello = Hello()
register_library("hello", {
    "on_plugin_load": lambda: manager.install(hello),
    "on_plugin_unload": lambda: manager.uninstall(hello),
})
manager.load("hello")      # installed
manager.unload("hello")    # uninstalled
```

Loading a name that was never registered raises `PluginError`.

## Running a game

Subclass `RenderSystem`, `Renderer` and `RenderWindow` for your backend. An `Engine`
creates its own `LogManager`, `PluginManager` and `SceneManager`, available as
`log_manager`, `plugin_manager` and `scene_manager`. Register your render system with
`register_render_system`, choose it with `set_render_system`, and register scenes with
`scene_manager.register_scene(name, SceneClass)`. Then call `load_scene(name)`.

`Engine.run(app)` calls `app.on_initialize()`. It then checks that a render system is set
and that its renderer is initialized. It polls events and draws a frame of the current
scene, cleared to the scene's `clear_color`, whenever there is no event. It does this
until `Engine.stop()` is called, and then calls `app.on_shutdown()`. Any `EngineError`
raised along the way is logged. In debug mode (`set_debug_mode(True)`) it is raised
again. `Engine.close()` shuts down the managers and releases the engine.

## What it does not do

The package ships no concrete render system, window or renderer. It opens no windows
and draws nothing until you supply them. Plugin libraries are not loaded from files on
disk; they must be registered in the running program with `register_library`. There is
no command-line program.