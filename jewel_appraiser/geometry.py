import math

from .constants import DIAMOND_CARAT_FACTOR, MM_PER_CM
from .utils import parse_number_or


def box_volume_cm3(length_mm, width_mm, height_mm) -> float:
    l = parse_number_or(length_mm, 0.0) / MM_PER_CM
    w = parse_number_or(width_mm, 0.0) / MM_PER_CM
    h = parse_number_or(height_mm, 0.0) / MM_PER_CM
    return max(0.0, l * w * h)


def cylinder_volume_cm3(diameter_mm, height_mm) -> float:
    # radius in cm is d/20 when d is in mm
    r = parse_number_or(diameter_mm, 0.0) / (2.0 * MM_PER_CM)
    h = parse_number_or(height_mm, 0.0) / MM_PER_CM
    return max(0.0, math.pi * r * r * h)


def diamond_carats(diameter_mm, depth_mm) -> float:
    """Round-brilliant weight estimate in carats from girdle diameter and total depth (mm)."""
    d = parse_number_or(diameter_mm, 0.0)
    depth = parse_number_or(depth_mm, 0.0)
    return max(0.0, DIAMOND_CARAT_FACTOR * d ** 2 * depth)
