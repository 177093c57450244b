"""
Application Initialization
==========================
This module wires the model and the view together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Parses the command line and sets up logging.
2. Loads the volcano table into validated records (Model).
3. Instantiates the Main Window (View), passing the records into it.
"""
import argparse
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtWidgets import QApplication, QMessageBox

from volcanomap.config import DEFAULT_DATA_PATH, VISIBLE_APP_NAME
from volcanomap.logging_config import LEVEL_NAMES, setup_logging
from volcanomap.model.io import load_volcano_csv
from volcanomap.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="volcanomap",
        description="Interactive scatter map of volcanoes by type and elevation.",
    )
    parser.add_argument(
        "csv", nargs="?", default=DEFAULT_DATA_PATH,
        help="Volcano table (CSV with header). Defaults to the bundled assets/volcanoes.csv.",
    )
    parser.add_argument(
        "--log-level", default="INFO",
        choices=LEVEL_NAMES, type=str.upper,
        help="Logging level (default: INFO).",
    )
    parser.add_argument("--log-file", default=None, help="Optional path to save logs to a file.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=args.log_level, log_file=args.log_file)

    # 2. Create the Qt Application
    app = QApplication(sys.argv[:1])
    app.setApplicationName(VISIBLE_APP_NAME)

    # 3. Load the Data Model
    try:
        records = load_volcano_csv(args.csv)
    except IOError as e:
        QMessageBox.critical(None, VISIBLE_APP_NAME, f"Could not load the volcano table:\n{e}")
        return 1

    if not records:
        logger.warning("No valid rows found; showing an empty map.")

    # 4. Initialize the Main Window, passing the records
    window = MainWindow(records, data_path=args.csv)
    window.show()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
