# topmark:header:start
#
#   project      : ReflowPP
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ReflowPP test suite.

Sets up TRACE logging for the run, keeps the developer's environment from
leaking into tests, and provides typed wrappers around pytest decorators.

Notes:
    Build configurations with `reflowpp.config.MutableConfig`, then
    ``freeze()`` them. Do not mutate a frozen `Config`; use
    `Config.thaw`, edit, and freeze again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from reflowpp.config import MutableConfig, logging

if TYPE_CHECKING:
    from reflowpp.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


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
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def clean_reflowpp_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell settings out of test runs.

    ``REFLOWPP_LOG_LEVEL`` would add log noise to CLI output, and the color
    variables would change what the console emits.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE for the whole run so failures come with full diagnostics."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from the runtime defaults and ``overrides``."""
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()
