# topmark:header:start
#
#   project      : TypedToml
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the TypedToml test suite.

This file sets up global fixtures, typed wrappers around pytest decorators and
the logging configuration for test runs, and provides the sample documents
shared by several test modules.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from typedtoml import load_string
from typedtoml.constants import LOG_LEVEL_ENV_VAR
from typedtoml.core import logging

if TYPE_CHECKING:
    from pathlib import Path

    from typedtoml import TomlHandle

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_typedtoml_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the log-level variable.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object (unused).
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


# --- Sample documents ---

BASIC_TOML = """\
title = "TOML Example"
integer = 42
pi = 3.14
flag = true
"""

SERVERS_TOML = """\
[[servers]]
name = "primary"
ip = "192.168.1.1"

[[servers]]
name = "backup"
ip = "192.168.1.2"
"""

NESTED_TOML = """\
[a]
[a.b]
c = 42
"""

UTF8_ARRAY_TOML = 's = ["中文", "👊🀄🔥"]\n'


@fixture()
def basic_doc() -> TomlHandle:
    """Handle on a document with one scalar of each common kind."""
    return load_string(BASIC_TOML)


@fixture()
def servers_doc() -> TomlHandle:
    """Handle on a document with an array of tables."""
    return load_string(SERVERS_TOML)


@fixture()
def nested_doc() -> TomlHandle:
    """Handle on a document with nested tables ``a.b``."""
    return load_string(NESTED_TOML)


@fixture()
def write_toml(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing TOML text (or raw bytes) to a file under ``tmp_path``.

    Args:
        tmp_path (Path): The pytest-provided temporary directory.

    Returns:
        Callable[..., Path]: ``write(content, name="doc.toml") -> Path``.
    """

    def _write(content: str | bytes, name: str = "doc.toml") -> Path:
        path: Path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
