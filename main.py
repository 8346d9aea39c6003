"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import logging
import os
import threading
from datetime import date

from calendar_day import CalendarDay
from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from tray_icon import create_tray

logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    level = os.environ.get("CALENDAR_DAY_GRID_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    _configure_logging()

    cal_win = CalendarWindow()

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        cal_win.root.after(0, cal_win.toggle)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            cal_win.root.destroy()
        cal_win.root.after(0, _quit)

    today = date.today()
    today_cell = CalendarDay(today, is_current_month=True, is_today=True)
    tray = create_tray(
        create_icon_image(today_cell.number()), on_show, on_exit,
        tooltip=f"Calendar – {today.isoformat()}",
    )

    # Run pystray in a daemon thread so it doesn't block tkinter
    threading.Thread(target=tray.run, daemon=True).start()
    logger.info("Tray started, entering tkinter main loop")

    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
