from .format_type import FormatType, DEFAULT_FORMAT
from .color_types import ColorSpace, TagMismatchError, RGB_FAMILY
