"""
Numeric backend configuration
=============================

Two mutually exclusive switches select how scalar conversions are computed:

- ``std_math``: Python's :mod:`math` module, double precision intermediates,
  results stored as float32 (the default).
- ``portable_math``: numpy ufuncs on float64 scalars, results stored as float32.

Both are read from the environment at import time::

    ACOLOR_STD_MATH=1        # default
    ACOLOR_PORTABLE_MATH=1   # switches to numpy float32 math

Enabling both is a configuration conflict and raises
:class:`~acolor.errors.BackendConflictError` right away.

Examples
--------
>>> from acolor.config import configure, use_backend
>>> configure(portable_math=True)
>>> with use_backend("math"):
...     ...
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Mapping, Optional

from . import backend
from .backend import BackendName
from .errors import BackendConflictError, ConfigurationError

logger = logging.getLogger(__name__)

ENV_STD_MATH = "ACOLOR_STD_MATH"
ENV_PORTABLE_MATH = "ACOLOR_PORTABLE_MATH"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _parse_flag(name: str, raw: Optional[str]) -> Optional[bool]:
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag (1/0, true/false), got {raw!r}")


@dataclass(frozen=True)
class BackendConfig:
    std_math: bool = True
    portable_math: bool = False

    def __post_init__(self) -> None:
        if self.std_math and self.portable_math:
            raise BackendConflictError(
                "std_math and portable_math are mutually exclusive: "
                f"unset {ENV_STD_MATH} or {ENV_PORTABLE_MATH} and enable a single numeric backend"
            )
        if not (self.std_math or self.portable_math):
            raise ConfigurationError(
                "No numeric backend selected: enable either std_math or portable_math"
            )

    @property
    def backend(self) -> BackendName:
        return "numpy" if self.portable_math else "math"

    @classmethod
    def from_backend(cls, name: str) -> BackendConfig:
        if name == "math":
            return cls(std_math=True, portable_math=False)
        if name == "numpy":
            return cls(std_math=False, portable_math=True)
        raise ConfigurationError(f"Unknown numeric backend: {name!r} (expected 'math' or 'numpy')")


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> BackendConfig:
    """Build a configuration from ``ACOLOR_STD_MATH`` / ``ACOLOR_PORTABLE_MATH``.

    A switch left unset defaults to the opposite of the other one, so setting
    only ``ACOLOR_PORTABLE_MATH=1`` selects the numpy backend.
    """
    env = os.environ if environ is None else environ
    std_math = _parse_flag(ENV_STD_MATH, env.get(ENV_STD_MATH))
    portable_math = _parse_flag(ENV_PORTABLE_MATH, env.get(ENV_PORTABLE_MATH))
    return _resolve(std_math, portable_math)


def _resolve(std_math: Optional[bool], portable_math: Optional[bool]) -> BackendConfig:
    if std_math is None and portable_math is None:
        return BackendConfig()
    if std_math is None:
        std_math = not portable_math
    if portable_math is None:
        portable_math = not std_math
    return BackendConfig(std_math=std_math, portable_math=portable_math)


_current: BackendConfig = BackendConfig()


def _apply(config: BackendConfig) -> None:
    global _current
    _current = config
    backend.activate(config.backend)
    logger.debug("acolor numeric backend set to %s", config.backend)


def get_config() -> BackendConfig:
    return _current


def configure(
    *,
    std_math: Optional[bool] = None,
    portable_math: Optional[bool] = None,
) -> BackendConfig:
    """Select the numeric backend. Raises on conflicting switches."""
    if std_math is None and portable_math is None:
        return _current
    config = _resolve(std_math, portable_math)
    _apply(config)
    return config


@contextmanager
def use_backend(name: BackendName) -> Iterator[BackendConfig]:
    """Temporarily switch the numeric backend."""
    previous = _current
    _apply(BackendConfig.from_backend(name))
    try:
        yield _current
    finally:
        _apply(previous)


_apply(config_from_env())
