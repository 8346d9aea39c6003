"""Single-month calendar window (tkinter) drawing CalendarDay cells."""

from __future__ import annotations

import calendar as _cal
import logging
import tkinter as tk
from datetime import date
from tkinter import font as tkfont

from calendar_day import CalendarDay
from calendar_logic import (
    GRID_ROWS,
    day_of_year,
    in_display_range,
    iso_week_numbers,
    month_days,
    month_weeks,
    next_month,
    prev_month,
    select_day,
    weekday_abbrs,
)
from settings import load_settings, save_settings
from theme import ACCENT, day_colors, palette

logger = logging.getLogger(__name__)


class CalendarWindow:
    """Month calendar shown from the tray icon."""

    def __init__(self) -> None:
        self.root = tk.Tk()
        self.root.title(self._title())
        self.root.resizable(True, True)
        self.root.attributes("-topmost", True)

        settings = load_settings()
        self.dark: bool = settings["dark_mode"]
        self.first_weekday: int = settings["first_weekday"]
        self.show_week_numbers: bool = settings["show_week_numbers"]
        self._saved_width: int | None = settings["window_width"]
        self._saved_height: int | None = settings["window_height"]
        self._colors = palette(self.dark)
        self.root.configure(bg=self._colors["grid_bg"])

        self._setup_fonts()

        today = date.today()
        self.year = today.year
        self.month = today.month
        self.selected: date | None = None

        self.days: list[CalendarDay] = []
        # Widget-to-cell mapping (filled during _rebuild)
        self._widget_days: dict[int, CalendarDay] = {}
        self._cells: list[list[tk.Label]] = []
        self._week_nums: list[tk.Label] = []

        self._build_shell()
        self._rebuild()

        self.root.bind("<Escape>", self._on_escape)
        self.root.bind("<Configure>", self._on_configure)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(root=self.root, family=base, size=9)
        self.font_bold = tkfont.Font(root=self.root, family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(root=self.root, family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(root=self.root, family=base, size=12, weight="bold")
        self.font_wn = tkfont.Font(root=self.root, family=base, size=8)

    @staticmethod
    def _title() -> str:
        return f"Calendar  Day: {day_of_year(date.today())}"

    # ------------------------------------------------------------------
    # Build shell (once) — nav bar + header + cell pool + footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        c = self._colors
        outer = tk.Frame(self.root, bg=c["grid_bg"])
        outer.pack(padx=6, pady=4)

        # Navigation row: ◀◀  ◀  Today  ▶  ▶▶
        nav = tk.Frame(outer, bg=c["grid_bg"])
        nav.pack(fill="x", pady=(0, 2))
        for text, side, command in (
            ("◀◀", "left", lambda: self._navigate_year(-1)),
            ("◀", "left", lambda: self._navigate(-1)),
            ("▶▶", "right", lambda: self._navigate_year(1)),
            ("▶", "right", lambda: self._navigate(1)),
        ):
            btn = tk.Label(nav, text=text, font=self.font_nav, bg=c["grid_bg"],
                           fg=c["fg"], cursor="hand2")
            btn.pack(side=side, padx=6)
            btn.bind("<Button-1>", lambda _e, cmd=command: cmd())

        btn_today = tk.Label(nav, text="Today", font=self.font_bold,
                             bg=c["grid_bg"], fg=ACCENT, cursor="hand2")
        btn_today.pack(side="left", padx=6)
        btn_today.bind("<Button-1>", lambda _e: self._go_today())

        grid = tk.Frame(outer, bg=c["grid_bg"])
        grid.pack()

        self._header = tk.Label(grid, font=self.font_header,
                                bg=c["header_bg"], fg=c["header_fg"])
        self._header.grid(row=0, column=0, columnspan=8, sticky="we", pady=(0, 2))

        if self.show_week_numbers:
            tk.Label(grid, text="Wk", font=self.font_bold, bg=c["grid_bg"],
                     fg=c["wn_fg"], width=3).grid(row=1, column=0)

        for col, abbr in enumerate(weekday_abbrs(self.first_weekday)):
            weekend = abbr in ("Sat", "Sun")
            tk.Label(grid, text=abbr, font=self.font_bold, bg=c["grid_bg"],
                     fg=c["weekend_fg"] if weekend else c["header_fg"],
                     width=3).grid(row=1, column=col + 1)

        for r in range(GRID_ROWS):
            wn = tk.Label(grid, font=self.font_wn, bg=c["grid_bg"],
                          fg=c["wn_fg"], width=3)
            if self.show_week_numbers:
                wn.grid(row=r + 2, column=0)
            self._week_nums.append(wn)

            row_cells: list[tk.Label] = []
            for col in range(7):
                cell = tk.Label(grid, font=self.font_normal, width=3,
                                cursor="hand2")
                cell.grid(row=r + 2, column=col + 1)
                cell.bind("<Button-1>", self._on_click)
                row_cells.append(cell)
            self._cells.append(row_cells)

        self._footer_label = tk.Label(outer, text=self._footer_text(),
                                      font=self.font_normal, bg=c["grid_bg"],
                                      fg=c["footer_fg"])
        self._footer_label.pack(pady=(4, 0))

    # ------------------------------------------------------------------
    # Rebuild the grid for the current month (today read once per pass)
    # ------------------------------------------------------------------
    def _rebuild(self) -> None:
        self.days = month_days(self.year, self.month, date.today(),
                               self.selected, self.first_weekday)
        self._widget_days.clear()
        self._header.configure(text=f"{_cal.month_name[self.month]} {self.year}")

        for r, (row, week) in enumerate(zip(month_weeks(self.days),
                                            iso_week_numbers(self.days))):
            self._week_nums[r].configure(text=week)
            for col, day in enumerate(row):
                cell = self._cells[r][col]
                self._widget_days[id(cell)] = day
                self._draw_cell(cell, day)
        self._footer_label.configure(text=self._footer_text())

    def _draw_cell(self, cell: tk.Label, day: CalendarDay) -> None:
        bg, fg = day_colors(day, self.dark)
        cell.configure(
            text=day.number(), bg=bg, fg=fg,
            font=self.font_bold if day.is_today else self.font_normal,
        )

    def _redraw(self) -> None:
        """Repaint cells after flag changes, without rebuilding the grid."""
        for row in self._cells:
            for cell in row:
                day = self._widget_days.get(id(cell))
                if day is not None:
                    self._draw_cell(cell, day)
        self._footer_label.configure(text=self._footer_text())

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def _on_click(self, event: tk.Event) -> None:
        day = self._widget_days.get(id(event.widget))
        if day is None:
            return
        self.selected = select_day(self.days, day.date)
        self._redraw()

    def _clear_selection(self) -> None:
        self.selected = None
        for day in self.days:
            day.is_selected = False

    def _on_escape(self, _event: tk.Event) -> None:
        if self.selected is not None:
            self._clear_selection()
            self._redraw()
        else:
            self.hide()

    def _footer_text(self) -> str:
        today_str = f"Today: {date.today().strftime('%d.%m.%Y')}"
        if self.selected is None:
            return today_str
        delta = (self.selected - date.today()).days
        if delta == 0:
            rel = "today"
        elif delta > 0:
            rel = f"in {delta} day{'s' if delta != 1 else ''}"
        else:
            rel = f"{-delta} day{'s' if delta != -1 else ''} ago"
        return f"{self.selected.strftime('%d.%m.%Y')} ({rel})     {today_str}"

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _navigate(self, direction: int) -> None:
        if direction < 0:
            year, month = prev_month(self.year, self.month)
        else:
            year, month = next_month(self.year, self.month)
        self._go_to(year, month)

    def _navigate_year(self, direction: int) -> None:
        self._go_to(self.year + direction, self.month)

    def _go_to(self, year: int, month: int) -> None:
        # Clicks past the supported range are ignored
        if not in_display_range(year):
            logger.debug("Ignoring navigation to %d-%02d", year, month)
            return
        self.year, self.month = year, month
        self._rebuild()

    def _go_today(self) -> None:
        today = date.today()
        self.year = today.year
        self.month = today.month
        self.selected = None
        self._rebuild()

    # ------------------------------------------------------------------
    # Window size (persisted on hide)
    # ------------------------------------------------------------------
    def _on_configure(self, event: tk.Event) -> None:
        if event.widget is not self.root:
            return
        self._saved_width = self.root.winfo_width()
        self._saved_height = self.root.winfo_height()

    def _persist_size(self) -> None:
        settings = load_settings()
        settings["window_width"] = self._saved_width
        settings["window_height"] = self._saved_height
        try:
            save_settings(settings)
        except OSError:
            logger.exception("Could not persist window size")

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.root.title(self._title())
        self._go_today()
        self.root.deiconify()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        if self._saved_width is not None and self._saved_height is not None:
            self._persist_size()
        self.root.withdraw()

    def _position_window(self) -> None:
        """Place the window in the bottom-right corner of the screen."""
        self.root.update_idletasks()
        win_w = self._saved_width or self.root.winfo_reqwidth()
        win_h = self._saved_height or self.root.winfo_reqheight()
        x = self.root.winfo_screenwidth() - win_w - 12
        y = self.root.winfo_screenheight() - win_h - 60
        self.root.geometry(f"{win_w}x{win_h}+{x}+{y}")
