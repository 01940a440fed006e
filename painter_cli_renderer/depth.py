#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/depth.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from functools import cmp_to_key


def centroid_compare(a, b) -> float:
    """
    Painter's-algorithm comparator: positive when ``b`` is farther than ``a``.

    Sorting with it puts the largest centroid z (farthest from a camera
    looking down +z) first.  Whole-primitive depth only; overlapping or
    interpenetrating primitives are not resolved.
    """
    return b.get_centroid_z() - a.get_centroid_z()


centroid_key = cmp_to_key(centroid_compare)


def sort_by_depth(primitives):
    """New list of ``primitives`` ordered farthest-first (stable for ties)."""
    return sorted(primitives, key=lambda p: p.get_centroid_z(), reverse=True)
