"""
Unit tests for terminal rendering and size formatting.
"""

import copy
import io

import pytest

from meminfomon.display import (
    TerminalRenderer,
    WINDOW_TITLE,
    build_level_view,
    format_bytes,
    format_kib,
)
from meminfomon.models import MemCounts, MemRange


@pytest.mark.unit
class TestFormatting:
    """Test cases for human-readable sizes."""

    @pytest.mark.parametrize(
        "size, expected",
        [
            (0, "0 B"),
            (1023, "1023 B"),
            (1024, "1 KiB"),
            (1536, "1.5 KiB"),
            (1024 ** 3, "1 GiB"),
        ],
    )
    def test_format_bytes(self, size, expected):
        assert format_bytes(size) == expected

    @pytest.mark.parametrize(
        "kib, expected",
        [
            (0, "0 B"),
            (16, "16 KiB"),
            (1536, "1.5 MiB"),
            (3200, "3.1 MiB"),
        ],
    )
    def test_format_kib(self, kib, expected):
        assert format_kib(kib) == expected


@pytest.mark.unit
class TestLevelView:
    """Test cases for the level bar model."""

    def test_view_mirrors_state(self):
        view = build_level_view("Dirty", MemRange(current=1536.0, highest=3200.0, units="kB"))

        assert view.value == 1536.0
        assert view.max_value == 3200.0
        assert view.units == "kB"
        assert view.label == "1.5 MiB"
        assert view.peak_label == "3.1 MiB"
        assert view.fill_fraction == pytest.approx(0.48)

    def test_empty_bar_before_any_sample(self):
        view = build_level_view("Writeback", MemRange())

        assert view.fill_fraction == 0.0

    def test_building_view_does_not_touch_state(self):
        state = MemRange(current=10.0, highest=20.0, units="kB")
        before = copy.deepcopy(state)

        build_level_view("Dirty", state)

        assert state == before


@pytest.mark.unit
class TestTerminalRenderer:
    """Test cases for frame output."""

    def test_frame_contents(self):
        stream = io.StringIO()
        renderer = TerminalRenderer(stream=stream, bar_width=10, redraw=False)
        counts = MemCounts(
            dirty=MemRange(current=5.0, highest=10.0, units="kB"),
            writeback=MemRange(),
        )

        renderer.render(counts)

        lines = stream.getvalue().splitlines()
        assert lines[0] == WINDOW_TITLE
        assert lines[1].startswith("Dirty      [#####-----]")
        assert "5 KiB" in lines[1]
        assert "(peak 10 KiB)" in lines[1]
        assert lines[2].startswith("Writeback  [----------]")
        assert "0 B" in lines[2]

    def test_full_bar_at_high_water_mark(self):
        renderer = TerminalRenderer(stream=io.StringIO(), bar_width=8, redraw=False)
        counts = MemCounts(dirty=MemRange(current=7.0, highest=7.0, units="kB"))

        frame = renderer.format_frame(counts)

        assert "[########]" in frame

    def test_redraw_clears_screen(self):
        stream = io.StringIO()
        renderer = TerminalRenderer(stream=stream, redraw=True)

        renderer.render(MemCounts())

        assert stream.getvalue().startswith("\x1b[H\x1b[2J" + WINDOW_TITLE)

    def test_append_mode_keeps_previous_frames(self):
        stream = io.StringIO()
        renderer = TerminalRenderer(stream=stream, redraw=False)

        renderer.render(MemCounts())
        renderer.render(MemCounts())

        assert stream.getvalue().count(WINDOW_TITLE) == 2
        assert "\x1b[" not in stream.getvalue()
