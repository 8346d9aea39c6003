"""Cell colours for the light and dark palettes."""

from calendar_day import CalendarDay

ACCENT = "#0078D4"

LIGHT = {
    "grid_bg": "white",
    "header_bg": "#F3F3F3",
    "header_fg": "#333333",
    "sel_bg": "#B3D7F2",
    "fg": "black",
    "weekend_fg": "#CC0000",
    "other_month_fg": "#AAAAAA",
    "wn_fg": "#888888",
    "footer_fg": "#555555",
}

DARK = {
    "grid_bg": "#202020",
    "header_bg": "#2B2B2B",
    "header_fg": "#E0E0E0",
    "sel_bg": "#264F78",
    "fg": "#E0E0E0",
    "weekend_fg": "#FF6B6B",
    "other_month_fg": "#666666",
    "wn_fg": "#888888",
    "footer_fg": "#AAAAAA",
}


def palette(dark: bool = False) -> dict[str, str]:
    return DARK if dark else LIGHT


def day_colors(day: CalendarDay, dark: bool = False) -> tuple[str, str]:
    """Return (background, foreground) for a cell from its display flags."""
    p = palette(dark)
    if day.is_today:
        return ACCENT, "white"
    if day.is_selected:
        return p["sel_bg"], p["fg"]
    if not day.is_current_month:
        return p["grid_bg"], p["other_month_fg"]
    if day.date.weekday() >= 5:
        return p["grid_bg"], p["weekend_fg"]
    return p["grid_bg"], p["fg"]
