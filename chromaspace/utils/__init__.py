from .hue import HueMode, normalize_hue, np_normalize_hue, hue_difference, hue_lerp, np_hue_lerp
