from datetime import date

from calendar_day import CalendarDay
from theme import ACCENT, DARK, LIGHT, day_colors

# 2026-10-14 is a Wednesday, 2026-10-17 a Saturday
WEEKDAY = date(2026, 10, 14)
SATURDAY = date(2026, 10, 17)


def test_today_wins_over_everything() -> None:
    day = CalendarDay(SATURDAY, False, True, True)
    assert day_colors(day) == (ACCENT, "white")


def test_selected() -> None:
    day = CalendarDay(WEEKDAY, True, False, True)
    assert day_colors(day) == (LIGHT["sel_bg"], LIGHT["fg"])


def test_other_month_dimmed() -> None:
    day = CalendarDay(SATURDAY, False, False)
    assert day_colors(day) == (LIGHT["grid_bg"], LIGHT["other_month_fg"])


def test_weekend_and_normal() -> None:
    assert day_colors(CalendarDay(SATURDAY, True, False))[1] == LIGHT["weekend_fg"]
    assert day_colors(CalendarDay(WEEKDAY, True, False))[1] == LIGHT["fg"]


def test_dark_palette() -> None:
    assert day_colors(CalendarDay(WEEKDAY, True, False), dark=True) == (
        DARK["grid_bg"], DARK["fg"])
