"""
__main__.py
-----------
Command-line entry point: `python -m saloon` or `saloon-shootout`.
"""

import argparse

from saloon.core.debug.debug_logger import DebugLogger
from saloon.core.runtime.game_settings import Display


def build_parser():
    parser = argparse.ArgumentParser(
        prog="saloon-shootout",
        description="Tap the outlaws before they shoot you."
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the session RNG for a repeatable game")
    parser.add_argument("--window-size", choices=sorted(Display.WINDOW_SIZES),
                        default=Display.DEFAULT_WINDOW_SIZE, help="Initial window preset")
    parser.add_argument("--log-level", default="INFO",
                        choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"],
                        type=str.upper, help="Console log verbosity")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    DebugLogger.set_level(args.log_level)

    # Imported late so --help works without opening a window
    from saloon.core.runtime.main_loop import MainLoop
    from saloon.scenes.game_session import GameSession

    MainLoop(GameSession(seed=args.seed), window_size=args.window_size).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
