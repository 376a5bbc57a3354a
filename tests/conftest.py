# reqlix:header:start
#
#   project      : Reqlix
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Reqlix contributors
#
# reqlix:header:end

"""Pytest configuration for the Reqlix test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `reqlix.config.MutableConfig` (mutable), then
      `freeze()` into a `reqlix.config.Config` for the store and the public API.
    - Do **not** mutate a frozen `Config`. If you need to tweak one, call
      `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from reqlix.config import MutableConfig, logging
from reqlix.store import RequirementStore

if TYPE_CHECKING:
    from pathlib import Path

    from reqlix.config import Config

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

#: Name of the requirements directory created below ``tmp_path`` by the fixtures.
REQUIREMENTS_DIRNAME: str = "requirements"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


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
def silence_reqlix_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Reqlix's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    REQLIX_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_mutable_config(tmp_path: Path, **overrides: Any) -> MutableConfig:
    """Return a mutable builder rooted at ``tmp_path``.

    The requirements directory defaults to ``tmp_path / "requirements"``.

    Args:
        tmp_path (Path): Project root for the test.
        **overrides (Any): Attributes set verbatim on the builder.

    Returns:
        MutableConfig: A mutable configuration ready to be frozen or further edited.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    m.root = tmp_path
    m.directory = str(tmp_path / REQUIREMENTS_DIRNAME)
    for k, v in overrides.items():
        setattr(m, k, v)
    return m


def make_config(tmp_path: Path, **overrides: Any) -> Config:
    """Return a frozen `Config` rooted at ``tmp_path``.

    Args:
        tmp_path (Path): Project root for the test.
        **overrides (Any): Attributes set on the builder before freezing.

    Returns:
        Config: An immutable configuration snapshot.
    """
    return make_mutable_config(tmp_path, **overrides).freeze()


def write_category(directory: Path, category: str, text: str) -> Path:
    """Write a category file verbatim (no newline translation) and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path: Path = directory / f"{category}.md"
    path.write_bytes(text.encode("utf-8"))
    return path


def read_category(directory: Path, category: str) -> str:
    """Return a category file's text verbatim (no newline translation)."""
    return (directory / f"{category}.md").read_bytes().decode("utf-8")


@pytest.fixture
def requirements_dir(tmp_path: Path) -> Path:
    """Return the (not yet created) requirements directory of the test project."""
    return tmp_path / REQUIREMENTS_DIRNAME


@pytest.fixture
def store(tmp_path: Path) -> RequirementStore:
    """Return a store over ``tmp_path / "requirements"`` with the atomic writer."""
    return RequirementStore(make_config(tmp_path))
