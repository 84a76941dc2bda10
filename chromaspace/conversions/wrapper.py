"""
Hub-and-spoke dispatcher.

Every space has one parent and XYZ is the root. A conversion walks the
source up towards XYZ, stops at the lowest node it shares with the target
(same space and a tag both sides can agree on), then walks down to the
target. Values travel as plain float triples together with their tag.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, List, Sequence, Tuple

from ..colorimetry.rgb_space import LumaStandard, RgbSpace, RgbStandard
from ..colorimetry.transfer import LINEAR
from ..types.color_types import RGB_FAMILY, ColorSpace, TagMismatchError
from .cylindrical import hsl_to_rgb, hsv_to_hwb, hsv_to_rgb, hwb_to_hsv, rgb_to_hsl, rgb_to_hsv
from .lab import lab_to_lch, lab_to_xyz, lch_to_lab, xyz_to_lab
from .xyz import luma_to_xyz, rgb_to_xyz, xyz_to_luma, xyz_to_rgb, xyz_to_yxy, yxy_to_xyz

Values = Tuple[float, ...]
Node = Tuple[ColorSpace, Any]

S = ColorSpace

PARENT: Dict[ColorSpace, ColorSpace] = {
    S.RGB: S.XYZ,
    S.LUMA: S.XYZ,
    S.YXY: S.XYZ,
    S.LAB: S.XYZ,
    S.LCH: S.LAB,
    S.HSV: S.RGB,
    S.HSL: S.RGB,
    S.HWB: S.HSV,
}

# tag of the parent node, given the tag of the child
PARENT_TAG: Dict[ColorSpace, Callable[[Any], Any]] = {
    S.RGB: lambda standard: standard.white_point,
    S.LUMA: lambda standard: standard.white_point,
    S.YXY: lambda wp: wp,
    S.LAB: lambda wp: wp,
    S.LCH: lambda wp: wp,
    S.HSV: lambda space: RgbStandard(space, LINEAR),
    S.HSL: lambda space: RgbStandard(space, LINEAR),
    S.HWB: lambda space: space,
}

TO_PARENT: Dict[ColorSpace, Callable[[Values, Any], Values]] = {
    S.RGB: lambda v, standard: rgb_to_xyz(*v, standard),
    S.LUMA: lambda v, standard: luma_to_xyz(*v, standard),
    S.YXY: lambda v, wp: yxy_to_xyz(*v),
    S.LAB: lambda v, wp: lab_to_xyz(*v, wp),
    S.LCH: lambda v, wp: lch_to_lab(*v),
    S.HSV: lambda v, space: hsv_to_rgb(*v),
    S.HSL: lambda v, space: hsl_to_rgb(*v),
    S.HWB: lambda v, space: hwb_to_hsv(*v),
}

FROM_PARENT: Dict[ColorSpace, Callable[[Values, Any], Values]] = {
    S.RGB: lambda v, standard: xyz_to_rgb(*v, standard),
    S.LUMA: lambda v, standard: xyz_to_luma(*v, standard),
    S.YXY: lambda v, wp: xyz_to_yxy(*v),
    S.LAB: lambda v, wp: xyz_to_lab(*v, wp),
    S.LCH: lambda v, wp: lab_to_lch(*v),
    S.HSV: lambda v, space: rgb_to_hsv(*v),
    S.HSL: lambda v, space: rgb_to_hsl(*v),
    S.HWB: lambda v, space: hsv_to_hwb(*v),
}


def _reencode(values: Values, source, dest) -> Values:
    """Swap transfer functions without leaving the space."""
    if source.transfer == dest.transfer:
        return tuple(values)
    return tuple(dest.transfer.from_linear(source.transfer.into_linear(v)) for v in values)


# Within one node a tag may change only where the data allows it: RGB between
# standards of one space, luma between standards of one white point.
RETAG: Dict[ColorSpace, Tuple[Callable[[Any, Any], bool], Callable[[Values, Any, Any], Values]]] = {
    S.RGB: (lambda a, b: a.space == b.space, _reencode),
    S.LUMA: (lambda a, b: a.white_point == b.white_point, _reencode),
}


def _can_retag(space: ColorSpace, source: Any, dest: Any) -> bool:
    if source == dest:
        return True
    if space in RETAG:
        return RETAG[space][0](source, dest)
    return False


def _retag(space: ColorSpace, values: Values, source: Any, dest: Any) -> Values:
    if source == dest:
        return tuple(values)
    return RETAG[space][1](values, source, dest)


def ancestry(space: ColorSpace, tag: Any) -> List[Node]:
    """``[(space, tag), (parent, parent_tag), ..., (XYZ, white_point)]``"""
    chain = [(space, tag)]
    while space != S.XYZ:
        tag = PARENT_TAG[space](tag)
        space = PARENT[space]
        chain.append((space, tag))
    return chain


def convert_values(
    values: Sequence[float],
    from_space: ColorSpace | str,
    from_tag: Any,
    to_space: ColorSpace | str,
    to_tag: Any,
) -> Values:
    """
    Convert raw float components between tagged spaces.

    Raises:
        TagMismatchError: if the source and target disagree on white point
            (or the conversion would otherwise need chromatic adaptation)
    """
    from_space = ColorSpace(from_space)
    to_space = ColorSpace(to_space)
    down = ancestry(to_space, to_tag)

    space, tag, current = from_space, from_tag, tuple(float(v) for v in values)
    while True:
        for depth, (target_space, target_tag) in enumerate(down):
            if target_space == space and _can_retag(space, tag, target_tag):
                current = _retag(space, current, tag, target_tag)
                for child_space, child_tag in reversed(down[:depth]):
                    current = tuple(FROM_PARENT[child_space](current, child_tag))
                return current

        if space == S.XYZ:
            raise TagMismatchError(
                f"cannot convert {from_space.value} tagged {from_tag!r} into "
                f"{to_space.value} tagged {to_tag!r}: white points differ, adapt the color first"
            )
        current = tuple(TO_PARENT[space](current, tag))
        tag = PARENT_TAG[space](tag)
        space = PARENT[space]


def infer_tag(color: Any, to_space: ColorSpace) -> Any:
    """Target tag used when the caller gives none: keep whatever the source already fixes."""
    from ..colors import color_classes  # local import to avoid cycles

    source_space = color.space
    if to_space in (S.XYZ, S.YXY, S.LAB, S.LCH):
        return color.white_point
    if to_space == S.RGB:
        if source_space == S.RGB:
            return color.tag
        if source_space in RGB_FAMILY:
            return RgbStandard(color.tag, LINEAR)
    elif to_space == S.LUMA:
        if source_space == S.LUMA:
            return color.tag
        if source_space == S.RGB:
            return LumaStandard(color.white_point, color.tag.transfer)
        return LumaStandard(color.white_point, LINEAR)
    elif to_space in RGB_FAMILY:
        if source_space == S.RGB:
            return color.tag.space
        if source_space in RGB_FAMILY:
            return color.tag
    return color_classes[to_space].default_tag


def convert(color: Any, to: Any, **tags: Any):
    """
    Convert a color into another space.

    Args:
        color: Any color value
        to: Target ``ColorSpace`` (or its string value), or a color class
        **tags: Target tag (``standard``, ``white_point`` or ``space``);
            inferred from the source, or the target class default, when omitted

    Returns:
        New color of the target class with the source's component format

    Raises:
        TypeError: for integer components or an unknown target
        TagMismatchError: when the conversion would cross white points
    """
    from ..colors import color_classes

    if isinstance(to, type):
        target_cls = to
        to_space = target_cls.space
    else:
        to_space = ColorSpace(to)
        target_cls = color_classes[to_space]

    if color.format_type.limited:
        raise TypeError(
            f"conversions require floating point components; "
            f"call into_format(FormatType.F32) on this {color.format_type.value} color first"
        )

    tag = tags.pop(target_cls.tag_name, None)
    if tags:
        raise TypeError(f"unexpected keyword(s) {sorted(tags)} for {target_cls.__name__}")
    if tag is None:
        base_cls = color_classes[to_space]
        if target_cls is not base_cls and 'default_tag' in vars(target_cls):
            tag = target_cls.default_tag
        else:
            tag = infer_tag(color, to_space)

    values = convert_values(color.into_raw(), color.space, color.tag, to_space, tag)
    return target_cls(*values, format_type=color.format_type, **{target_cls.tag_name: tag})
