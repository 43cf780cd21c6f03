"""Application entry point."""

import logging

import tkinter as tk

from ui.app import TemperatureApp
from ui.models import APP_TITLE


def main() -> None:
    """Launch the Tkinter application."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    root = tk.Tk()
    root.title(APP_TITLE)
    TemperatureApp(root)
    root.mainloop()


if __name__ == "__main__":
    main()
