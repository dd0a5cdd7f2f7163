from __future__ import annotations
from typing import Optional

from .color_base import ColorBase
from .srgb import srgb_tuple_to_class
from .oklab import oklab_tuple_to_class
from ..conversions import ColorSpace, convert
from ..types.format_type import FormatType
from ..types.color_types import Scalar

unified_tuple_to_class: dict[tuple[str, FormatType], type[ColorBase]] = {
    **srgb_tuple_to_class,
    **oklab_tuple_to_class,
}


def get_color_class(color_space: str, format_type: FormatType = FormatType.FLOAT) -> type[ColorBase]:
    color_class = unified_tuple_to_class.get((color_space.lower(), FormatType(format_type)))
    if color_class is None:
        raise ValueError(
            f"Unsupported color space/format combination: {color_space}/{FormatType(format_type).value}"
        )
    return color_class


def color_convert(
    self: ColorBase,
    to_space: Optional[ColorSpace] = None,
    to_format: Optional[FormatType] = None,
    alpha: Optional[Scalar] = None,
) -> ColorBase:
    """
    Convert this color to a different color space and/or format.

    Args:
        to_space: Target color space ("srgb", "linear_srgba", "oklch", ...).
            Defaults to the current space.
        to_format: Target format type (INT, FLOAT). Defaults to the current
            format when the target space has it, FLOAT otherwise.
        alpha: Alpha for targets with an alpha channel, in the target's
            numeric domain. Defaults to the source alpha, or opaque.

    Returns:
        New ColorBase instance in the target space/format
    """
    to_space = (to_space or self.mode).lower()  # type: ignore[assignment]
    if to_format is None:
        to_format = self.format_type
        if (to_space, to_format) not in unified_tuple_to_class:
            to_format = FormatType.FLOAT
    cls = get_color_class(to_space, to_format)

    if cls is type(self) and alpha is None:
        return self

    result = convert(
        color=self.value,
        from_space=self.mode,
        to_space=to_space,
        input_type=self.format_type,
        output_type=cls.format_type,
        alpha=alpha,
    )
    return cls(*result)


ColorBase.convert = color_convert
