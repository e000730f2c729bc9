"""Wireframe graphs of y = f(x, z) surfaces and a wave-equation simulation."""

__version__ = "0.1.0"