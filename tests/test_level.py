import pytest

from copydash.level import (
    BLOCK_HEIGHT,
    BLOCK_WIDTH,
    GROUND_Y,
    PORTAL_INITIAL_X,
    SPIKE_HEIGHT,
    SPIKE_WIDTH,
    Block,
    Level,
    Obstacle,
    background_vertices,
    block_vertices,
    build_level,
    play_vertices,
    player_vertices,
    portal_vertices,
    spike_vertices,
    title_vertices,
)


def test_obstacle_reset_restores_initial_x():
    spike = Obstacle(2.5, GROUND_Y)
    spike.x -= 1.0
    spike.reset()
    assert spike.x == spike.initial_x == 2.5


def test_obstacle_default_size_is_spike_size():
    spike = Obstacle(1.0, 0.0)
    assert (spike.width, spike.height) == (SPIKE_WIDTH, SPIKE_HEIGHT)


def test_block_reset_restores_initial_x():
    block = Block(4.0, GROUND_Y)
    block.x = -3.0
    block.reset()
    assert block.x == 4.0


def test_block_default_size_is_block_size():
    block = Block(1.0, 0.0)
    assert (block.width, block.height) == (BLOCK_WIDTH, BLOCK_HEIGHT)


def test_level_portal_starts_at_nine():
    level = build_level()
    assert level.portal_x == 9.0
    assert level.portal_initial_x == PORTAL_INITIAL_X


def test_first_spikes_are_on_ground_half_a_unit_apart():
    level = build_level()
    first = level.obstacles[:5]
    assert [o.x for o in first] == [1.0, 1.5, 2.0, 2.5, 3.0]
    assert all(o.y == GROUND_Y for o in first)


def test_single_raised_spike_sits_on_block():
    level = build_level()
    raised = [o for o in level.obstacles if o.y != GROUND_Y]
    assert len(raised) == 1
    assert raised[0].x == 4.375
    assert raised[0].y == pytest.approx(GROUND_Y + BLOCK_HEIGHT)


def test_late_spikes_skip_block_towers():
    level = build_level()
    xs = [o.x for o in level.obstacles]
    assert not any(5.05 < x < 5.55 for x in xs)
    assert not any(5.95 < x < 6.35 for x in xs)
    assert max(xs) <= 7.8


def test_floating_blocks_present():
    level = build_level()
    positions = {(round(b.x, 2), round(b.y, 2)) for b in level.blocks}
    for expected in [(6.8, -0.5), (6.9, -0.5), (7.15, -0.4), (7.25, -0.4)]:
        assert expected in positions


def test_blocks_are_never_below_ground():
    level = build_level()
    assert level.blocks
    assert all(b.y >= GROUND_Y for b in level.blocks)
    assert all(b.initial_x == b.x for b in level.blocks)


def test_level_reset_restores_everything():
    level = build_level()
    before_obstacles = [o.x for o in level.obstacles]
    before_blocks = [b.x for b in level.blocks]
    level.portal_x -= 5.0
    for o in level.obstacles:
        o.x -= 1.23
    for b in level.blocks:
        b.x -= 4.56
    level.reset()
    assert level.portal_x == level.portal_initial_x
    assert [o.x for o in level.obstacles] == before_obstacles
    assert [b.x for b in level.blocks] == before_blocks


def test_empty_level_reset_moves_portal_back():
    level = Level(portal_x=1.0, portal_initial_x=3.0)
    level.reset()
    assert level.portal_x == 3.0


def test_background_covers_whole_screen():
    vertices = background_vertices()
    assert len(vertices) == 6
    assert {v[0] for v in vertices} == {-1.0, 1.0}
    assert {v[1] for v in vertices} == {-1.0, 1.0}


@pytest.mark.parametrize(
    "factory",
    [background_vertices, title_vertices, play_vertices, player_vertices, portal_vertices],
)
def test_quads_have_six_vertices_with_valid_uv(factory):
    vertices = factory()
    assert len(vertices) == 6
    assert all(len(v) == 4 for v in vertices)
    assert all(0.0 <= v[2] <= 1.0 and 0.0 <= v[3] <= 1.0 for v in vertices)


def test_title_is_above_play_button():
    title_bottom = min(v[1] for v in title_vertices())
    play_top = max(v[1] for v in play_vertices())
    assert title_bottom > play_top


def test_play_button_matches_click_area():
    xs = [v[0] for v in play_vertices()]
    ys = [v[1] for v in play_vertices()]
    assert min(xs) == pytest.approx(-0.2)
    assert max(xs) == pytest.approx(0.2)
    assert min(ys) == pytest.approx(-0.5)
    assert max(ys) == pytest.approx(-0.1)


def test_portal_is_centred_and_sized():
    vertices = portal_vertices()
    xs = [v[0] for v in vertices]
    ys = [v[1] for v in vertices]
    assert max(xs) - min(xs) == pytest.approx(0.1)
    assert max(ys) - min(ys) == pytest.approx(0.4)
    assert sum(xs) == pytest.approx(0.0)


def test_block_vertices_have_z_zero():
    vertices = block_vertices()
    assert len(vertices) == 6
    assert all(len(v) == 5 and v[2] == 0.0 for v in vertices)
    assert max(v[0] for v in vertices) == pytest.approx(BLOCK_WIDTH / 2)


def test_spike_is_triangle_with_apex_at_top_centre():
    vertices = spike_vertices()
    assert len(vertices) == 3
    apex = max(vertices, key=lambda v: v[1])
    assert apex[0] == 0.0
    assert apex[2:] == (0.5, 0.0)


def test_player_vertices_symmetric():
    vertices = player_vertices()
    assert sorted(v[0] for v in vertices) == sorted(-v[0] for v in vertices)
    assert sorted(v[1] for v in vertices) == sorted(-v[1] for v in vertices)