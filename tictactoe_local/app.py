import sys
import logging
import argparse

from PySide6.QtWidgets import QApplication

from .ui import theme
from .ui.main_window import TicTacToeWindow

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="tictactoe",
        description="Local two-player Tic Tac Toe.",
    )
    parser.add_argument("--theme", choices=theme.THEMES, default=theme.LIGHT,
                        help="initial colour theme (default: %(default)s)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING",
                        help="logging verbosity (default: %(default)s)")
    return parser.parse_args(argv)


# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Qt keeps its own options in argv, ours are already parsed
    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')

    window = TicTacToeWindow(theme_name=args.theme)
    window.show()
    return app.exec()
