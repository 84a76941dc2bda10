"""Reference values shared by the conversion and color tests."""

# linear RGB -> HSV (hue in degrees)
samples_rgb_hsv = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 1.0),
    (0.0, 1.0, 0.0): (120.0, 1.0, 1.0),
    (0.0, 0.0, 1.0): (240.0, 1.0, 1.0),
    (1.0, 1.0, 0.0): (60.0, 1.0, 1.0),
    (0.0, 1.0, 1.0): (180.0, 1.0, 1.0),
    (1.0, 0.0, 1.0): (300.0, 1.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.5, 0.25, 0.25): (0.0, 0.5, 0.5),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

# linear RGB -> HSL
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (120.0, 1.0, 0.5),
    (0.0, 0.0, 1.0): (240.0, 1.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (0.5, 0.25, 0.25): (0.0, 1.0 / 3.0, 0.375),
}

# linear sRGB primaries -> XYZ (D65)
samples_linear_srgb_xyz = {
    (1.0, 0.0, 0.0): (0.4124564, 0.2126729, 0.0193339),
    (0.0, 1.0, 0.0): (0.3575761, 0.7151522, 0.1191920),
    (0.0, 0.0, 1.0): (0.1804375, 0.0721750, 0.9503041),
    (1.0, 1.0, 1.0): (0.95047, 1.0, 1.08883),
}

# gamma-encoded sRGB values spread over the cube, for round trips
srgb_grid = [
    (r, g, b)
    for r in (0.0, 0.2, 0.55, 1.0)
    for g in (0.0, 0.35, 0.8, 1.0)
    for b in (0.0, 0.1, 0.65, 1.0)
]
