"""Optional adapters between acolor colors and other libraries.

The core package never imports these; ``acolor.interop.pil`` needs Pillow.
"""

from .arrays import to_numpy, from_numpy, convert_array

__all__ = ["to_numpy", "from_numpy", "convert_array"]
