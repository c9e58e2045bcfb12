"""
natspec_py.cli
--------------

Command-line entrypoints for natspec_py.

Console scripts:
  - `natspec-py`  -> natspec_py.cli.main:main

`resolve_entrypoint` loads a CLI by name without importing Typer up front.
"""

from __future__ import annotations

from importlib import import_module
from typing import Callable, Dict

ENTRYPOINTS: Dict[str, str] = {
    "natspec-py": "natspec_py.cli.main:main",
}


def resolve_entrypoint(name: str) -> Callable[[], None]:
    """
    Resolve a CLI name to its `main()` callable.

    Raises
    ------
    KeyError
        If `name` is not a known entrypoint.
    ImportError
        If the target module cannot be imported.
    """
    target = ENTRYPOINTS[name]  # may raise KeyError (intentional)
    module_path, _, attr = target.partition(":")
    main_fn = getattr(import_module(module_path), attr)
    if not callable(main_fn):
        raise AttributeError(f"Entrypoint {target!r} is not callable")
    return main_fn


__all__ = ["ENTRYPOINTS", "resolve_entrypoint"]
