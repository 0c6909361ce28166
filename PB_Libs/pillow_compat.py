"""
Compatibility wrapper to import Pillow (which provides the `PIL` namespace)
from one place.

This module loads the Pillow-provided modules via importlib and re-exports
the symbols the library uses: `Image` and `ImageColor`. Importing from
`pillow_compat` keeps a single point of failure with a helpful message
when Pillow is not installed.
"""
from importlib import import_module
from types import ModuleType


def _import(name: str) -> ModuleType:
    try:
        return import_module(name)
    except ImportError as exc:
        raise ImportError(
            "pillow (PIL) is required: install with 'pip install Pillow'"
        ) from exc


Image = _import("PIL.Image")
ImageColor = _import("PIL.ImageColor")
