"""Geometry, rasterization and per-kind rendering."""

from __future__ import annotations


def register_renderers() -> None:
    """Import all kind modules so @renderer decorators fire."""
    import importlib
    import pkgutil

    package = importlib.import_module("segdisplay.engine.kinds")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
