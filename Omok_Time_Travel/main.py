"""Entry point for Omok Time Travel. Load config, pick a front end, start the session."""

import yaml
from pathlib import Path

from .Omokgame import Omokgame
from .gui.text_view import TextView
from .utils.cli import parse_args
from .utils.logger import log_event, silent


PROJECT_DIR = Path(__file__).resolve().parent


def settings_path(path: str | Path) -> Path:
    """Prefer the given path; fall back to the copy bundled inside the package."""
    given = Path(path)
    if given.is_absolute() or given.exists():
        return given
    bundled = PROJECT_DIR / given
    return bundled if bundled.exists() else given


def load_settings(path):
    path = settings_path(path)
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    use_gui = args.gui if args.gui is not None else bool(settings.get("gui", False))
    window_size = args.window_size or settings.get("window_size", 800)
    log_moves = settings.get("log_moves", True) and not args.quiet

    session = Omokgame(logger=log_event if log_moves else silent)

    if use_gui:
        from .gui.pygame_view import PygameView

        PygameView(window_size=window_size).run(session)
    else:
        TextView().run(session)

    print(session.status_text)


if __name__ == "__main__":
    main()
