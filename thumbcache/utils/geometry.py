import math
from typing import NamedTuple, Optional


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class CropBox(NamedTuple):
    x:     int
    y:     int
    w:     int
    h:     int
    out_h: int

    @property
    def box(self) -> tuple[int, int, int, int]:
        """(left, upper, right, lower) as Pillow's ``resize(box=...)`` wants it."""
        return (self.x, self.y, self.x + self.w, self.y + self.h)


def compute_crop(src_w: int, src_h: int, target_w: int,
                 target_h: Optional[int] = None) -> CropBox:
    """Centre "cover" crop of the source for a ``target_w x target_h`` box.

    Without ``target_h`` the output height follows the source aspect ratio
    and the whole source is used.  Otherwise the longer axis (relative to
    the target) is trimmed evenly on both sides so the remaining region has
    the target aspect ratio.
    """
    if src_w <= 0 or src_h <= 0:
        raise ValueError(f"invalid source size {src_w}x{src_h}")
    if target_w <= 0 or (target_h is not None and target_h <= 0):
        raise ValueError(f"invalid target size {target_w}x{target_h}")

    if target_h is None:
        out_h = max(1, _round_half_up(target_w * src_h / src_w))
        return CropBox(0, 0, src_w, src_h, out_h)

    ratio_x = src_w / target_w
    ratio_y = src_h / target_h
    x, y, w, h = 0, 0, src_w, src_h

    if ratio_x > ratio_y:
        exact_w = target_w * src_h / target_h
        w = min(src_w, max(1, _round_half_up(exact_w)))
        x = min(src_w - w, _round_half_up((src_w - exact_w) / 2))
    elif ratio_y > ratio_x:
        exact_h = target_h * src_w / target_w
        h = min(src_h, max(1, _round_half_up(exact_h)))
        y = min(src_h - h, _round_half_up((src_h - exact_h) / 2))

    return CropBox(x, y, w, h, target_h)
