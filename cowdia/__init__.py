"""A small game engine core: vector, matrix and quaternion math, colors, rectangles, logging, plugins, scenes and a render loop."""

__version__ = "0.1.0"