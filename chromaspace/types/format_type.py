# No dependencies
from enum import Enum
import numpy as np


class FormatType(str, Enum):
    """Numeric representation of a color component."""
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    F32 = "f32"
    F64 = "f64"

    @property
    def max_intensity(self) -> int | float:
        return max_intensity[self]

    @property
    def limited(self) -> bool:
        """True when the max intensity is also the largest value the type can hold."""
        return self in limited_formats

    @property
    def is_float(self) -> bool:
        return self not in limited_formats


max_intensity = {
    FormatType.U8: 255,
    FormatType.U16: 65535,
    FormatType.U32: 4294967295,
    FormatType.U64: 18446744073709551615,
    FormatType.F32: 1.0,
    FormatType.F64: 1.0,
}

limited_formats = frozenset({
    FormatType.U8,
    FormatType.U16,
    FormatType.U32,
    FormatType.U64,
})

format_classes = {
    FormatType.U8: int,
    FormatType.U16: int,
    FormatType.U32: int,
    FormatType.U64: int,
    FormatType.F32: float,
    FormatType.F64: float,
}

default_format_dtypes = {
    FormatType.U8: np.uint8,
    FormatType.U16: np.uint16,
    FormatType.U32: np.uint32,
    FormatType.U64: np.uint64,
    FormatType.F32: np.float32,
    FormatType.F64: np.float64,
}

format_valid_dtypes = {
    FormatType.U8: (int, np.integer),
    FormatType.U16: (int, np.integer),
    FormatType.U32: (int, np.integer),
    FormatType.U64: (int, np.integer),
    FormatType.F32: (float, int, np.floating, np.integer),
    FormatType.F64: (float, int, np.floating, np.integer),
}

DEFAULT_FORMAT = FormatType.F32
HUE_360 = 360.0
