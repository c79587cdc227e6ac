"""
Tests for line splitting, reveal timing and the swipeable viewer.
"""

import pytest

from tech_therapy.client.reveal import (
    SWIPE_CONFIDENCE_THRESHOLD,
    ResponseViewer,
    char_schedule,
    line_duration,
    split_lines,
)
from tech_therapy.modes import AnimationTiming

TIMING = AnimationTiming(char_stagger=0.1, char_duration=0.5, line_pause=1.0, easing="easeOut")

COMPLETION = "1. Pods crash, but you don't.\n\n2. You are the orchestrator.\n3. YAML fears you.\n"


def _viewer(text=COMPLETION, finished=True):
    viewer = ResponseViewer(TIMING)
    viewer.update(text, finished)
    return viewer


def test_split_lines_drops_blank_lines():
    assert split_lines("  one \n\n\ttwo\n   \n") == ["one", "two"]
    assert split_lines("") == []


def test_char_schedule_staggers_characters():
    schedule = char_schedule("abc", TIMING)
    assert [char for char, _ in schedule] == ["a", "b", "c"]
    assert [delay for _, delay in schedule] == pytest.approx([0.0, 0.1, 0.2])


def test_line_duration_includes_fade_and_pause():
    assert line_duration("abc", TIMING) == pytest.approx(0.2 + 0.5 + 1.0)
    assert line_duration("", TIMING) == pytest.approx(1.0)


def test_partial_last_line_is_not_complete_while_streaming():
    viewer = _viewer("first line\nsecond li", finished=False)
    assert viewer.lines == ["first line", "second li"]
    assert viewer.is_line_complete(0)
    assert not viewer.is_line_complete(1)

    viewer.update("first line\nsecond line", finished=True)
    assert viewer.is_line_complete(1)


def test_tick_auto_advances_after_line_duration():
    viewer = _viewer()
    duration = line_duration(viewer.current_line, TIMING)

    assert not viewer.tick(duration / 2)
    assert viewer.index == 0
    assert viewer.tick(duration / 2)
    assert viewer.index == 1
    assert viewer.elapsed == 0.0


def test_tick_waits_for_next_line_to_arrive():
    viewer = _viewer("only line so far", finished=False)
    assert not viewer.tick(60)
    assert viewer.index == 0

    viewer.update("only line so far\nnext one\n", finished=False)
    assert viewer.tick(0)
    assert viewer.current_line == "next one"


def test_tick_does_not_land_on_a_line_still_streaming():
    viewer = _viewer("done line\nhalf", finished=False)

    assert not viewer.tick(100)
    assert viewer.index == 0
    assert viewer.current_line == "done line"

    viewer.update("done line\nhalf of it arrived\n", finished=False)
    assert viewer.tick(0)
    assert viewer.current_line == "half of it arrived"


def test_manual_navigation_skips_incomplete_lines():
    viewer = _viewer("one\ntwo\nthr", finished=False)

    assert viewer.indicators() == [True, False, False]
    assert not viewer.go_to(2)
    assert viewer.go_to(1)
    assert not viewer.next()
    assert not viewer.swipe(offset=-500, velocity=500)
    assert viewer.current_line == "two"

    viewer.update("one\ntwo\nthree", finished=True)
    assert viewer.swipe(offset=-500, velocity=500)
    assert viewer.current_line == "three"


def test_manual_navigation_and_dots():
    viewer = _viewer()
    assert viewer.indicators() == [True, False, False]

    assert viewer.go_to(2)
    assert viewer.indicators() == [False, False, True]
    assert not viewer.next()
    assert viewer.previous()
    assert viewer.current_line == "2. You are the orchestrator."
    assert not viewer.go_to(3)
    assert not viewer.go_to(-1)


def test_swipe_needs_enough_power():
    viewer = _viewer()
    assert not viewer.swipe(offset=-10, velocity=100)
    assert viewer.index == 0

    assert viewer.swipe(offset=-100, velocity=SWIPE_CONFIDENCE_THRESHOLD / 100)
    assert viewer.index == 1
    assert viewer.swipe(offset=200, velocity=-400)
    assert viewer.index == 0
    assert not viewer.swipe(offset=200, velocity=400)


def test_update_clamps_index_when_text_shrinks():
    viewer = _viewer()
    viewer.go_to(2)
    viewer.update("", finished=True)

    assert viewer.index == 0
    assert viewer.current_line == ""
    assert viewer.indicators() == []
