"""CLI options for choosing the front end and config path."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Omok Time Travel (15x15 five in a row)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument(
        "--gui",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use the pygame window (--no-gui forces the console; default from settings)",
    )
    parser.add_argument("--window-size", type=int, help="Pygame board size in pixels")
    parser.add_argument("--quiet", action="store_true", help="Do not log moves and jumps")
    return parser.parse_args(argv)
