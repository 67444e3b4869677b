#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/notemark/utils/decorators.py
"""Decorators and context managers shared by parsers and renderers.

``requires_dependencies`` guards code paths that need optional packages
(the Jinja2 template mode of the HTML renderer), and ``debug_timer`` logs
how long a parse or render took when DEBUG logging is on.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from notemark.exceptions import DependencyError
from notemark.utils.packages import check_version_requirement


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before a method runs.

    Parameters
    ----------
    converter_name : str
        Name of the feature needing the packages, used in error messages
        (e.g. ``"html templates"``)
    packages : list of tuple
        ``(install_name, import_name, version_spec)`` tuples. An empty
        ``version_spec`` accepts any installed version.

    Returns
    -------
    Callable
        Decorator applying the check

    Raises
    ------
    DependencyError
        When the wrapped callable is invoked and a package is missing or
        has an incompatible version. All problems are collected before
        raising.

    Examples
    --------
        >>> @requires_dependencies("html templates", [("jinja2", "jinja2", ">=3.1.0")])
        ... def render_template(self, context):
        ...     import jinja2
        ...     ...

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing: list[tuple[str, str]] = []
            version_mismatches: list[tuple[str, str, str]] = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e
                    continue

                if version_spec:
                    meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                    if not meets_requirement:
                        version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

            if missing or version_mismatches:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the elapsed time of a block at DEBUG level.

    Nothing is measured when the logger is not enabled for DEBUG.

    Parameters
    ----------
    logger : logging.Logger
        Logger receiving the timing message
    operation : str
        Description used in the message, e.g. ``"Parsing (markdown)"``

    Examples
    --------
        >>> with debug_timer(logger, "Rendering (html)"):
        ...     html = renderer.render_to_string(nodes)

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    start_time = time.perf_counter()
    yield
    elapsed = time.perf_counter() - start_time
    logger.debug("%s completed in %.4fs", operation, elapsed)
