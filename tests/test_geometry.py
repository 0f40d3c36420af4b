from flappy.engine.geometry import barrier_rects, hits_bottom, hits_top, overlaps_x, pipe_collides
from flappy.entities.bird import Bird
from flappy.entities.pipe import PipePair


def bird_at(y, x=50):
    return Bird(x=x, y=y, width=30, height=30)


def pipe_at(x, top=200, gap=150):
    return PipePair(x=x, top_height=top, width=50, gap=gap)


def test_overlaps_x_is_open_on_both_edges():
    assert overlaps_x(50, 30, 60, 50)
    assert not overlaps_x(50, 30, 80, 50)   # pipe starts at bird's right edge
    assert not overlaps_x(50, 30, 0, 50)    # pipe ends at bird's left edge


def test_bird_inside_gap_is_safe():
    assert not pipe_collides(pipe_at(40), bird_at(250))


def test_top_barrier():
    p = pipe_at(40)
    b = bird_at(199)
    assert hits_top(p, b)
    assert not hits_bottom(p, b)
    assert pipe_collides(p, b)


def test_bottom_barrier():
    p = pipe_at(40)           # bottom_y = 350
    b = bird_at(321)          # bottom edge 351
    assert hits_bottom(p, b)
    assert not hits_top(p, b)


def test_no_hit_when_horizontally_clear():
    assert not pipe_collides(pipe_at(200), bird_at(0))


def test_barrier_rects_cover_screen_outside_gap():
    top, bottom = barrier_rects(pipe_at(120, top=180), 600)
    assert top == (120, 0, 50, 180)
    assert bottom == (120, 330, 50, 270)
