"""Acolor: sRGB, linear sRGB, Oklab and Oklch color types and conversions."""

import logging

from .config import configure, use_backend, get_config, BackendConfig
from .errors import AcolorError, ConfigurationError, BackendConflictError
from .colors.srgb import (
    Srgb8,
    Srgba8,
    Srgb32,
    Srgba32,
    LinearSrgb32,
    LinearSrgba32,
)
from .colors.oklab import Oklab32, Oklch32
from .colors.color_base import ColorBase
from .colors.color import color_convert, get_color_class
from .conversions import (
    Unorm8,
    GAMMA,
    linearize,
    nonlinearize,
    linear_srgb_to_oklab,
    oklab_to_linear_srgb,
    oklab_to_oklch,
    oklch_to_oklab,
    np_linearize,
    np_nonlinearize,
    np_linear_srgb_to_oklab,
    np_oklab_to_linear_srgb,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
    convert,
    np_convert,
    FormatType,
)
from .utils import min_value, max_value, clamp

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # core color types
    "ColorBase",
    "Srgb8",
    "Srgba8",
    "Srgb32",
    "Srgba32",
    "LinearSrgb32",
    "LinearSrgba32",
    "Oklab32",
    "Oklch32",
    "color_convert",
    "get_color_class",
    # conversions
    "Unorm8",
    "GAMMA",
    "linearize",
    "nonlinearize",
    "linear_srgb_to_oklab",
    "oklab_to_linear_srgb",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "np_linearize",
    "np_nonlinearize",
    "np_linear_srgb_to_oklab",
    "np_oklab_to_linear_srgb",
    "np_oklab_to_oklch",
    "np_oklch_to_oklab",
    "convert",
    "np_convert",
    "FormatType",
    # configuration and errors
    "configure",
    "use_backend",
    "get_config",
    "BackendConfig",
    "AcolorError",
    "ConfigurationError",
    "BackendConflictError",
    # helpers
    "min_value",
    "max_value",
    "clamp",
]
