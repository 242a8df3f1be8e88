"""Package-level checks: public API and module documentation."""

from __future__ import annotations

import importlib
import pkgutil

import genotables


def test_public_api():
    assert genotables.__version__
    for name in genotables.__all__:
        assert hasattr(genotables, name)


def test_every_module_has_a_docstring():
    for info in pkgutil.walk_packages(genotables.__path__, prefix="genotables."):
        module = importlib.import_module(info.name)
        assert module.__doc__ and module.__doc__.strip(), info.name
