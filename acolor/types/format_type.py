from enum import Enum
import numpy as np


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"


# Value of a fully opaque alpha channel, also the top of the unorm range
opaque_alpha = {
    FormatType.INT: 255,
    FormatType.FLOAT: np.float32(1.0),
}

format_classes = {
    FormatType.INT: int,
    FormatType.FLOAT: np.float32,
}

default_format_dtypes = {
    FormatType.INT: np.uint8,
    FormatType.FLOAT: np.float32,
}

UNORM8_MAX = 255
HUE_360 = 360.0
