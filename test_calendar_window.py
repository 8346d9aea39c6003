"""Drives CalendarWindow directly: selection, Escape, size persistence.

Needs a display (run under xvfb on headless machines).
"""

from types import SimpleNamespace

import pytest

tk = pytest.importorskip("tkinter")

from calendar_logic import MAX_YEAR, MIN_YEAR  # noqa: E402
from calendar_window import CalendarWindow  # noqa: E402
from settings import load_settings  # noqa: E402
from theme import ACCENT, palette  # noqa: E402


@pytest.fixture
def make_window(tmp_path, monkeypatch):
    monkeypatch.setenv("CALENDAR_DAY_GRID_SETTINGS", str(tmp_path / "settings.json"))
    windows = []

    def _make() -> CalendarWindow:
        try:
            win = CalendarWindow()
        except tk.TclError as e:
            pytest.skip(f"no display available: {e}")
        windows.append(win)
        return win

    yield _make
    for win in windows:
        try:
            win.root.destroy()
        except tk.TclError:
            pass


@pytest.fixture
def window(make_window):
    return make_window()


def _pick_cell(win):
    """Return a (label, cell) pair for a plain current-month day."""
    for row in win._cells:
        for label in row:
            day = win._widget_days[id(label)]
            if day.is_current_month and not day.is_today:
                return label, day
    raise AssertionError("no current-month cell on the grid")


def _click(win, label) -> None:
    win._on_click(SimpleNamespace(widget=label))


def _descendants(widget):
    for child in widget.winfo_children():
        yield child
        yield from _descendants(child)


class TestSelection:
    def test_click_selects_and_redraws(self, window) -> None:
        label, day = _pick_cell(window)
        footer_before = window._footer_label.cget("text")

        _click(window, label)

        assert window.selected == day.date
        assert [d for d in window.days if d.is_selected] == [day]
        assert label.cget("bg") == palette()["sel_bg"]
        footer = window._footer_label.cget("text")
        assert footer != footer_before
        assert day.date.strftime("%d.%m.%Y") in footer

    def test_second_click_clears(self, window) -> None:
        label, day = _pick_cell(window)
        _click(window, label)
        _click(window, label)

        assert window.selected is None
        assert day.is_selected is False
        assert label.cget("bg") == palette()["grid_bg"]

    def test_cells_show_unpadded_numbers(self, window) -> None:
        for row in window._cells:
            for label in row:
                day = window._widget_days[id(label)]
                assert label.cget("text") == str(day.date.day)


class TestEscape:
    def test_clears_selection_then_hides(self, window) -> None:
        window.show()
        window.root.update()
        label, _day = _pick_cell(window)
        _click(window, label)

        window._on_escape(None)
        assert window.selected is None
        assert not any(d.is_selected for d in window.days)
        assert window.root.state() != "withdrawn"

        window._on_escape(None)
        assert window.root.state() == "withdrawn"


class TestPersistence:
    def test_hide_writes_window_size(self, window) -> None:
        window._saved_width = 320
        window._saved_height = 280
        window.hide()

        saved = load_settings()
        assert saved["window_width"] == 320
        assert saved["window_height"] == 280

    def test_size_restored_after_restart(self, make_window) -> None:
        first = make_window()
        first._saved_width = 300
        first._saved_height = 260
        first.hide()
        first.root.destroy()

        second = make_window()
        assert second._saved_width == 300
        assert second._saved_height == 260


class TestNavigation:
    def test_month_and_year_steps(self, window) -> None:
        window.year, window.month = 2026, 12
        window._navigate(1)
        assert (window.year, window.month) == (2027, 1)
        window._navigate_year(-1)
        assert (window.year, window.month) == (2026, 1)
        assert window._header.cget("text") == "January 2026"

    def test_stops_at_last_year(self, window) -> None:
        window.year, window.month = MAX_YEAR, 12
        window._navigate(1)
        window._navigate_year(1)
        assert (window.year, window.month) == (MAX_YEAR, 12)

    def test_stops_at_first_year(self, window) -> None:
        window.year, window.month = MIN_YEAR, 1
        window._navigate(-1)
        window._navigate_year(-1)
        assert (window.year, window.month) == (MIN_YEAR, 1)

    def test_today_button_uses_accent(self, window) -> None:
        today = [w for w in _descendants(window.root)
                 if isinstance(w, tk.Label) and w.cget("text") == "Today"]
        assert len(today) == 1
        assert today[0].cget("fg") == ACCENT
