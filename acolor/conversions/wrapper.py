import numpy as np
from typing import Callable, Dict, Optional, Sequence, Union

from ..types.format_type import FormatType, opaque_alpha, format_classes
from ..types.color_types import (
    ColorSpace,
    ScalarVector,
    SPACE_CHAIN,
    base_space,
    has_alpha_channel,
)
from .numbers import Unorm8, np_unorm8_to_float, np_float_to_unorm8
from .gamma import linearize, nonlinearize, np_linearize, np_nonlinearize
from .oklab import (
    linear_srgb_to_oklab,
    oklab_to_linear_srgb,
    oklab_to_oklch,
    oklch_to_oklab,
    np_linear_srgb_to_oklab,
    np_oklab_to_linear_srgb,
    np_oklab_to_oklch,
    np_oklch_to_oklab,
)

# Only gamma encoded sRGB has an 8-bit representation.
INT_SPACES = {"srgb", "srgba"}


def _srgb_to_linear(r, g, b):
    return linearize(r), linearize(g), linearize(b)


def _linear_to_srgb(r, g, b):
    return nonlinearize(r), nonlinearize(g), nonlinearize(b)


def _np_srgb_to_linear(r, g, b):
    return np.stack([np_linearize(r), np_linearize(g), np_linearize(b)], axis=-1)


def _np_linear_to_srgb(r, g, b):
    return np.stack([np_nonlinearize(r), np_nonlinearize(g), np_nonlinearize(b)], axis=-1)


# One step along SPACE_CHAIN, keyed by the space being left.
CONVERT_FORWARD: Dict[str, Callable] = {
    "srgb": _srgb_to_linear,
    "linear_srgb": linear_srgb_to_oklab,
    "oklab": oklab_to_oklch,
}
CONVERT_BACKWARD: Dict[str, Callable] = {
    "oklch": oklch_to_oklab,
    "oklab": oklab_to_linear_srgb,
    "linear_srgb": _linear_to_srgb,
}
CONVERT_NUMPY_FORWARD: Dict[str, Callable[..., np.ndarray]] = {
    "srgb": _np_srgb_to_linear,
    "linear_srgb": np_linear_srgb_to_oklab,
    "oklab": np_oklab_to_oklch,
}
CONVERT_NUMPY_BACKWARD: Dict[str, Callable[..., np.ndarray]] = {
    "oklch": np_oklch_to_oklab,
    "oklab": np_oklab_to_linear_srgb,
    "linear_srgb": _np_linear_to_srgb,
}


def validate_space_format(space: str, fmt: FormatType) -> None:
    base_space(space)
    if fmt == FormatType.INT and space.lower() not in INT_SPACES:
        raise ValueError(f"Unsupported color space/format combination: {space}/{fmt.value}")


def _walk(base, from_space: str, to_space: str, forward, backward, unpack):
    i = SPACE_CHAIN.index(from_space)
    j = SPACE_CHAIN.index(to_space)
    while i < j:
        base = forward[SPACE_CHAIN[i]](*unpack(base))
        i += 1
    while i > j:
        base = backward[SPACE_CHAIN[i]](*unpack(base))
        i -= 1
    return base


# === Scalar path ===

def normalize(color: Sequence, fmt: FormatType) -> tuple:
    if fmt == FormatType.INT:
        return tuple(Unorm8(c).to_float() for c in color)
    return tuple(color)


def scale(color: Sequence, fmt: FormatType) -> tuple:
    if fmt == FormatType.INT:
        return tuple(int(Unorm8.from_float(c)) for c in color)
    return tuple(np.float32(c) for c in color)


def coerce_alpha(alpha, fmt: FormatType):
    """Bring an alpha already expressed in ``fmt`` to its storage type."""
    if fmt == FormatType.INT:
        return int(Unorm8(alpha))
    return format_classes[fmt](alpha)


def convert_alpha(alpha, input_fmt: FormatType, output_fmt: FormatType):
    if alpha is None:
        return None
    if input_fmt == output_fmt:
        return coerce_alpha(alpha, output_fmt)
    if output_fmt == FormatType.INT:
        return int(Unorm8.from_float(alpha))
    return Unorm8(alpha).to_float()


def _convert_core(
    color: Sequence,
    from_space: str,
    to_space: str,
    input_fmt: FormatType,
    output_fmt: FormatType,
    alpha=None,
) -> tuple:
    if has_alpha_channel(from_space):
        base, source_alpha = tuple(color[:3]), color[3]
    else:
        base, source_alpha = tuple(color), None

    converted = _walk(
        normalize(base, input_fmt),
        base_space(from_space),
        base_space(to_space),
        CONVERT_FORWARD,
        CONVERT_BACKWARD,
        unpack=lambda c: c,
    )
    out = scale(converted, output_fmt)

    if not has_alpha_channel(to_space):
        return out
    if alpha is not None:
        # explicit alpha is already in the target's domain
        return out + (coerce_alpha(alpha, output_fmt),)
    new_alpha = convert_alpha(source_alpha, input_fmt, output_fmt)
    if new_alpha is None:
        new_alpha = opaque_alpha[output_fmt]
    return out + (new_alpha,)


def convert(
    color: ScalarVector,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: FormatType = FormatType.FLOAT,
    output_type: Optional[FormatType] = None,
    alpha=None,
) -> ScalarVector:
    """
    Convert one color, given as a component tuple, between spaces and formats.

    Args:
        color: 3 or 4 components, in ``from_space`` order
        from_space: Source space ("srgb", "srgba", "linear_srgb", ...)
        to_space: Target space
        input_type: Numeric format of ``color``
        output_type: Numeric format of the result, defaults to ``input_type``
        alpha: Alpha to attach when the target has an alpha channel, in the
            target's numeric domain. Defaults to the source alpha, or opaque.

    Returns:
        Component tuple in ``to_space`` order.

    Raises:
        ValueError: unknown space, unsupported space/format pair or wrong
            number of components.
    """
    input_fmt = FormatType(input_type)
    output_fmt = FormatType(output_type) if output_type is not None else input_fmt
    from_space, to_space = from_space.lower(), to_space.lower()  # type: ignore[assignment]
    validate_space_format(from_space, input_fmt)
    validate_space_format(to_space, output_fmt)
    expected = 4 if has_alpha_channel(from_space) else 3
    if len(color) != expected:
        raise ValueError(f"{from_space} expects {expected} components, got {len(color)}")
    return _convert_core(color, from_space, to_space, input_fmt, output_fmt, alpha)


# === Vectorized path ===

def np_normalize(color: np.ndarray, fmt: FormatType) -> np.ndarray:
    if fmt == FormatType.INT:
        return np_unorm8_to_float(color)
    return np.asarray(color, dtype=float)


def np_scale(color: np.ndarray, fmt: FormatType) -> np.ndarray:
    if fmt == FormatType.INT:
        return np_float_to_unorm8(color)
    return np.asarray(color, dtype=np.float32)


def np_coerce_alpha(alpha, fmt: FormatType) -> np.ndarray:
    if fmt == FormatType.INT:
        return np.clip(np.asarray(alpha), 0, 255).astype(np.uint8)
    return np.asarray(alpha, dtype=np.float32)


def np_convert_alpha(alpha: Optional[np.ndarray], input_fmt: FormatType, output_fmt: FormatType) -> Optional[np.ndarray]:
    if alpha is None:
        return None
    if input_fmt == output_fmt:
        return np_coerce_alpha(alpha, output_fmt)
    if output_fmt == FormatType.INT:
        return np_float_to_unorm8(alpha)
    return np_unorm8_to_float(alpha)


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
    input_type: FormatType = FormatType.FLOAT,
    output_type: Optional[FormatType] = None,
    alpha: Union[float, int, np.ndarray, None] = None,
) -> np.ndarray:
    """Vectorized :func:`convert` over arrays shaped ``(..., channels)``."""
    input_fmt = FormatType(input_type)
    output_fmt = FormatType(output_type) if output_type is not None else input_fmt
    from_space, to_space = from_space.lower(), to_space.lower()  # type: ignore[assignment]
    validate_space_format(from_space, input_fmt)
    validate_space_format(to_space, output_fmt)

    color = np.asarray(color)
    expected = 4 if has_alpha_channel(from_space) else 3
    if color.shape[-1] != expected:
        raise ValueError(f"{from_space} expects last dimension to be {expected}, got shape {color.shape}")

    if has_alpha_channel(from_space):
        base, source_alpha = color[..., :3], color[..., 3]
    else:
        base, source_alpha = color, None

    converted = _walk(
        np_normalize(base, input_fmt),
        base_space(from_space),
        base_space(to_space),
        CONVERT_NUMPY_FORWARD,
        CONVERT_NUMPY_BACKWARD,
        unpack=lambda c: (c[..., 0], c[..., 1], c[..., 2]),
    )
    out = np_scale(converted, output_fmt)

    if not has_alpha_channel(to_space):
        return out
    if alpha is not None:
        new_alpha = np.broadcast_to(np_coerce_alpha(alpha, output_fmt), out.shape[:-1])
    else:
        new_alpha = np_convert_alpha(source_alpha, input_fmt, output_fmt)
        if new_alpha is None:
            new_alpha = np.full(out.shape[:-1], opaque_alpha[output_fmt], dtype=out.dtype)
    return np.concatenate([out, new_alpha[..., None]], axis=-1)


__all__ = [
    "convert",
    "np_convert",
    "normalize",
    "scale",
    "convert_alpha",
    "validate_space_format",
]
