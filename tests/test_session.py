import base64

import pygame
import pytest

import dvd_screensaver as dvd

from conftest import LOGO_RGBA


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randrange(self, start, stop):
        self.calls.append((start, stop))
        return self.value


def test_bundled_logo_decodes(pg):
    logo = dvd.load_logo()
    assert logo.get_size() == (360, 195)
    assert logo.get_at((0, 0)).a == 0


@pytest.mark.parametrize("payload", ["not base64!!", base64.b64encode(b"hello, not a png").decode()])
def test_broken_logo_is_fatal(pg, payload):
    with pytest.raises(dvd.AssetError):
        dvd.load_logo(payload)


@pytest.mark.parametrize("size, bounds, expected", [
    ((100, 80), (114, 85), (100, 80)),
    ((360, 195), (114, 85), (114, 62)),
    ((50, 50), (10, 20), (10, 10)),
    ((1000, 10), (7, 7), (7, 1)),
])
def test_thumbnail_size(size, bounds, expected):
    assert dvd.thumbnail_size(size, bounds) == expected


def test_new_session_spawns_centered(pg, logo):
    s = dvd.new_session((800, 600), logo)
    assert (s.rect.x, s.rect.y) == (0.0, 0.0)
    assert (s.rect.w, s.rect.h) == (100.0, 80.0)
    assert s.velocity == [300.0, 300.0]
    assert s.first_pointer_pos is None
    assert s.image is not logo
    assert s.image.get_size() == (100, 80)


def test_new_session_thumbnails_bundled_logo(pg):
    s = dvd.new_session((1920, 1080))
    w, h = s.image.get_size()
    assert w <= 1920 // 7 and h <= 1080 // 7
    assert (s.rect.w, s.rect.h) == (w, h)
    assert w / h == pytest.approx(360 / 195, rel=0.02)


def test_hue_rotate_zero_is_identity(pg, logo):
    out = dvd.hue_rotate(logo, 0)
    assert tuple(out.get_at((5, 5))) == LOGO_RGBA


def test_hue_rotate_leaves_source_alone(pg, logo):
    out = dvd.hue_rotate(logo, 180)
    assert out is not logo
    assert tuple(logo.get_at((5, 5))) == LOGO_RGBA
    assert tuple(out.get_at((5, 5)))[:3] != LOGO_RGBA[:3]


def test_hue_rotate_keeps_alpha_and_grays(pg):
    surf = pygame.Surface((4, 4), pygame.SRCALPHA, 32)
    surf.fill((128, 128, 128, 77))
    out = dvd.hue_rotate(surf, 150)
    r, g, b, a = out.get_at((1, 1))
    assert a == 77
    assert all(127 <= v <= 128 for v in (r, g, b))


def test_hue_rotate_truncates_fractions(pg, logo):
    # 180 deg: (30, 80, 255) -> (133.9, 83.9, -91.1)
    assert tuple(dvd.hue_rotate(logo, 180).get_at((0, 0))) == (133, 83, 0, 255)


def test_change_color_draws_from_hue_range(pg, logo):
    rng = FixedRng(180)
    out = dvd.change_color(logo, rng)
    assert rng.calls == [dvd.HUE_RANGE]
    assert out.get_at((3, 3)) == dvd.hue_rotate(logo, 180).get_at((3, 3))


def test_rect_shift_keeps_size():
    r = dvd.Rect(1.0, 2.0, 30.0, 40.0).shift_x(5.0).shift_y(-7.0)
    assert (r.x, r.y, r.w, r.h) == (6.0, -5.0, 30.0, 40.0)
    assert (r.left, r.right, r.bottom, r.top) == (-9.0, 21.0, -25.0, 15.0)
