import pytest

from pvzgame.tools import DelayTimer, blend_pixel, clip_region


def _fake_clock(values):
    it = iter(values)
    return lambda: next(it)


def test_first_delay_is_zero():
    timer = DelayTimer(_fake_clock([1000, 1055]))
    assert timer.delay() == 0


def test_delays_sum_to_elapsed_time():
    stamps = [500, 530, 600, 601, 900]
    timer = DelayTimer(_fake_clock(stamps))
    delays = [timer.delay() for _ in stamps]
    assert delays[0] == 0
    assert sum(delays) == stamps[-1] - stamps[0]
    assert delays[1] == stamps[1] - stamps[0]


def test_default_clock_is_non_decreasing():
    timer = DelayTimer()
    assert timer.delay() == 0
    assert timer.delay() >= 0


@pytest.mark.parametrize("rgb", [0x000000, 0x123456, 0xFFFFFF, 0xABCDEF])
@pytest.mark.parametrize("dst", [0x000000, 0x808080, 0xFFFFFF])
def test_opaque_source_wins(rgb, dst):
    assert blend_pixel(0xFF000000 | rgb, dst) == rgb


@pytest.mark.parametrize("rgb", [0x000000, 0x123456, 0xFFFFFF])
@pytest.mark.parametrize("dst", [0x000000, 0x654321, 0xFFFFFF])
def test_transparent_source_keeps_destination(rgb, dst):
    assert blend_pixel(rgb, dst) == dst


def test_destination_alpha_is_ignored():
    assert blend_pixel(0x00000000, 0xFF112233) == 0x112233


@pytest.mark.parametrize("alpha", [1, 64, 128, 200, 254])
def test_partial_blend_lies_between(alpha):
    src = (alpha << 24) | 0xFFFFFF
    result = blend_pixel(src, 0x000000)
    for shift in (16, 8, 0):
        channel = (result >> shift) & 0xFF
        assert 0 <= channel <= 0xFF
    assert result <= 0xFFFFFF
    darker = blend_pixel(((alpha - 1) << 24) | 0xFFFFFF, 0x000000)
    assert darker <= result


def test_clip_inside_window_is_unchanged():
    assert clip_region(10, 20, 50, 60, 900, 600) == (10, 20, 0, 0, 50, 60)


@pytest.mark.parametrize("x,y", [(900, 10), (10, 600), (1000, 700)])
def test_clip_off_screen_is_none(x, y):
    assert clip_region(x, y, 50, 50, 900, 600) is None


def test_clip_top():
    dest_x, dest_y, src_x, src_y, w, h = clip_region(30, -10, 50, 50, 900, 600)
    assert (dest_x, dest_y, src_x) == (30, 0, 0)
    assert src_y + h == 50
    assert w == 50


def test_clip_left():
    dest_x, dest_y, src_x, src_y, w, h = clip_region(-20, 40, 50, 50, 900, 600)
    assert (dest_x, dest_y, src_y) == (0, 40, 0)
    assert src_x + w == 50
    assert h == 50


def test_clip_right():
    dest_x, _, src_x, _, w, h = clip_region(880, 40, 50, 50, 900, 600)
    assert dest_x + w == 900
    assert src_x == 0
    assert h == 50


def test_clip_bottom():
    _, dest_y, _, src_y, w, h = clip_region(40, 580, 50, 50, 900, 600)
    assert dest_y + h == 600
    assert src_y == 0
    assert w == 50


def test_clip_entirely_above_is_none():
    assert clip_region(10, -60, 50, 50, 900, 600) is None


def test_clip_entirely_left_is_none():
    assert clip_region(-60, 10, 50, 50, 900, 600) is None


@pytest.mark.parametrize(
    "x,y", [(-30, -30), (870, -20), (-10, 570), (880, 590), (100, 100)]
)
def test_clip_result_fits_window_and_image(x, y):
    region = clip_region(x, y, 50, 50, 900, 600)
    dest_x, dest_y, src_x, src_y, w, h = region
    assert 0 <= dest_x and dest_x + w <= 900
    assert 0 <= dest_y and dest_y + h <= 600
    assert 0 <= src_x and src_x + w <= 50
    assert 0 <= src_y and src_y + h <= 50