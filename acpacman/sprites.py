"""Cut individual sprites out of packed sprite sheets (atlases)."""

from collections import namedtuple

from .errors import OutOfBoundsError

SpriteRect = namedtuple("SpriteRect", "name width height x y")


def fits(width, height, offset_x, offset_y, size):
    aw, ah = size
    if min(width, height, offset_x, offset_y) < 0: return False
    return offset_x + width <= aw and offset_y + height <= ah


def _check_ints(name, *values):
    if not all(isinstance(v, int) for v in values):
        raise TypeError(f"{name}: sprite rectangle must be whole pixels, got {values}")


def get_sprite(width, height, offset_x, offset_y, atlas, name="sprite"):
    """Return an independent copy of the ``width`` x ``height`` block at
    (``offset_x``, ``offset_y``) of ``atlas``.

    The copy keeps the atlas pixel format and is never scaled. A rectangle
    that leaves the atlas raises OutOfBoundsError instead of being clamped;
    non-integer geometry raises TypeError instead of being truncated.
    """
    _check_ints(name, width, height, offset_x, offset_y)
    size = atlas.get_size()
    if not fits(width, height, offset_x, offset_y, size):
        raise OutOfBoundsError(name, (width, height, offset_x, offset_y), size)
    # subsurface() shares pixels with the atlas; copy() detaches them
    return atlas.subsurface((offset_x, offset_y, width, height)).copy()


def extract_all(atlas, rects):
    return {r.name: get_sprite(r.width, r.height, r.x, r.y, atlas, r.name) for r in rects}


def check_table(rects, size):
    for r in rects:
        _check_ints(r.name, r.width, r.height, r.x, r.y)
        if not fits(r.width, r.height, r.x, r.y, size):
            raise OutOfBoundsError(r.name, (r.width, r.height, r.x, r.y), tuple(size))


def overlaps(a, b):
    return (a.x < b.x + b.width and b.x < a.x + a.width and
            a.y < b.y + b.height and b.y < a.y + a.height)
