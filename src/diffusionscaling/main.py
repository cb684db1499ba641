"""
Application Initialization
==========================
This module constructs the controller and the main window and starts the Qt
event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging from the command line.
2. Instantiates the SimulationController (owner of the sweep).
3. Passes the controller into the MainWindow so they can communicate.
"""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

import pyqtgraph as pg

from diffusionscaling.application import create_app
from diffusionscaling.controller.simulation import SimulationController
from diffusionscaling.logging_config import setup_logging
from diffusionscaling.view.main_window import MainWindow

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")
pg.setConfigOptions(antialias=True)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Diffusion time scaling explorer (t = L²/D).")
    parser.add_argument("--debug", action="store_true", help="Log every simulation step.")
    parser.add_argument("--log-file", default=None, help="Also write the log to this file.")
    # Qt consumes its own options (e.g. -platform) from sys.argv
    args, _qt_args = parser.parse_known_args(argv)
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the application."""
    args = parse_args(argv)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    app = create_app()

    controller = SimulationController()
    window = MainWindow(controller)
    window.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
