from typing import List, Tuple

Rect = Tuple[int, int, int, int]


def overlaps_x(a_x: float, a_w: float, b_x: float, b_w: float) -> bool:
    # open interval: touching edges do not count
    return a_x + a_w > b_x and a_x < b_x + b_w


def hits_top(pipe, bird) -> bool:
    return overlaps_x(bird.x, bird.width, pipe.x, pipe.width) and bird.y < pipe.top_height


def hits_bottom(pipe, bird) -> bool:
    return overlaps_x(bird.x, bird.width, pipe.x, pipe.width) and bird.y + bird.height > pipe.bottom_y


def pipe_collides(pipe, bird) -> bool:
    return hits_top(pipe, bird) or hits_bottom(pipe, bird)


def barrier_rects(pipe, screen_h: int) -> List[Rect]:
    """Top and bottom barrier boxes of a pair as (x, y, w, h)."""
    x, w = int(pipe.x), pipe.width
    top = int(pipe.top_height)
    bottom = int(pipe.bottom_y)
    return [(x, 0, w, top), (x, bottom, w, screen_h - bottom)]
