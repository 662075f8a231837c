"""Tests for frame composition against a recording surface."""

from SpectrogramViewer.core.constants import HIGHLIGHT_COLOR
from SpectrogramViewer.core.region import Rect
from SpectrogramViewer.core.renderer import ViewRenderer, clip_crop, draw_rect
from SpectrogramViewer.core.tracker import ViewTracker

WINDOW = Rect(0, 0, 640, 480)


def render(tracker, surface):
    ViewRenderer(640, 480).render(tracker, surface)
    return surface.calls


def test_full_view_frame(surface):
    calls = render(ViewTracker(), surface)
    assert calls == [("clear",), ("blit", None, None), ("present",)]


def test_selecting_frame_draws_overlay(surface):
    t = ViewTracker()
    t.on_pointer_down(200, 100)
    t.on_pointer_move(50, 150)
    calls = render(t, surface)
    assert calls == [
        ("clear",),
        ("blit", None, None),
        ("set_draw_color", HIGHLIGHT_COLOR),
        ("fill_rect", Rect(50, 100, 150, 50)),
        ("present",),
    ]


def test_selecting_over_zoomed_view_uses_full_source(surface):
    t = ViewTracker()
    t.on_pointer_down(0, 0)
    t.on_pointer_up(100, 100)
    t.on_pointer_down(10, 10)
    calls = render(t, surface)
    assert ("blit", None, None) in calls
    assert ("fill_rect", Rect(10, 10, 1, 1)) in calls


def test_cropped_frame_stretches_rect(surface):
    t = ViewTracker()
    t.on_pointer_down(10, 20)
    t.on_pointer_up(110, 70)
    calls = render(t, surface)
    assert calls == [("clear",), ("blit", Rect(10, 20, 100, 50), WINDOW), ("present",)]


def test_zero_area_crop_renders_single_pixel(surface):
    t = ViewTracker()
    t.on_pointer_down(10, 10)
    t.on_pointer_up(10, 10)
    calls = render(t, surface)
    assert calls[1] == ("blit", Rect(10, 10, 1, 1), WINDOW)


def test_zero_area_crop_outside_source_draws_nothing(surface):
    t = ViewTracker()
    t.on_pointer_down(640, 480)
    t.on_pointer_up(640, 480)
    assert render(t, surface) == [("clear",), ("present",)]


def test_crop_partly_outside_source_is_clipped(surface):
    t = ViewTracker()
    t.on_pointer_down(-320, 0)
    t.on_pointer_up(320, 480)
    calls = render(t, surface)
    assert calls[1] == ("blit", Rect(0, 0, 320, 480), Rect(320, 0, 320, 480))


def test_reset_after_zoom_renders_full_view(surface):
    t = ViewTracker()
    t.on_pointer_down(10, 20)
    t.on_pointer_up(110, 70)
    t.on_reset_shortcut()
    assert render(t, surface) == [("clear",), ("blit", None, None), ("present",)]


def test_every_frame_is_cleared_and_presented_once(surface):
    t = ViewTracker()
    renderer = ViewRenderer(640, 480)
    for step in (lambda: None, lambda: t.on_pointer_down(5, 5), lambda: t.on_pointer_up(9, 9)):
        step()
        surface.calls.clear()
        renderer.render(t, surface)
        assert surface.names().count("clear") == 1
        assert surface.names()[-1] == "present"


def test_draw_rect_raises_empty_dimensions():
    assert draw_rect(Rect(3, 4, 0, 0)) == Rect(3, 4, 1, 1)
    assert draw_rect(Rect(3, 4, 5, 0)) == Rect(3, 4, 5, 1)
    assert draw_rect(Rect(3, 4, 5, 6)) == Rect(3, 4, 5, 6)


def test_clip_crop_scales_destination():
    src = Rect(600, 440, 80, 80)
    clipped = clip_crop(src, WINDOW, WINDOW)
    assert clipped == (Rect(600, 440, 40, 40), Rect(0, 0, 320, 240))


def test_clip_crop_inside_and_disjoint():
    inside = Rect(1, 2, 3, 4)
    assert clip_crop(inside, WINDOW, WINDOW) == (inside, WINDOW)
    assert clip_crop(Rect(-10, -10, 5, 5), WINDOW, WINDOW) is None
