import logging
import sys
from pathlib import Path

from PySide6.QtCore import QCoreApplication

ROOT = Path(__file__).resolve().parent
SRC_DIR = ROOT / "src"

if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from core.columns import ColumnKind
from core.config import load_config
from core.state import AppState
from core.utils import format_playback_time

logger = logging.getLogger("pytunes")

def print_library(app_state: AppState) -> None:
    library = app_state.library.snapshot()
    columns = [c for c in library.columns() if c.enabled and c.kind != ColumnKind.PLAYING]

    print(" | ".join(c.display_name() for c in columns))
    for track in library.ordered_tracks():
        cells = {
            ColumnKind.TITLE: track.title,
            ColumnKind.ARTIST: track.artist,
            ColumnKind.ALBUM: track.album,
            ColumnKind.DURATION: format_playback_time(track.duration),
            ColumnKind.TRACK_NUMBER: track.track_number_label(),
            ColumnKind.KIND: track.kind,
            ColumnKind.DATE_ADDED: track.date_added,
        }
        print(" | ".join(cells[c.kind] for c in columns))

def init_app_state() -> AppState:
    config = load_config()
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Library file: %s", config.library_path)

    app_state = AppState(config)
    app_state.notification.connect(lambda n: logger.log(
        logging.ERROR if n.notify_type == "error" else logging.INFO, n.message))
    app_state.load_library()
    return app_state

def main() -> int:
    """
    Headless session: load the library, optionally sort it, print it.

        python main.py [SORT_COLUMN]

    SORT_COLUMN is a column kind such as Title, Album or DateAdded.
    """
    qt_app = QCoreApplication(sys.argv)

    app_state = init_app_state()

    args = sys.argv[1:]
    if args:
        try:
            app_state.sort_by_column(ColumnKind(args[0]))
        except ValueError:
            kinds = ", ".join(k.value for k in ColumnKind)
            print(f"Unknown column '{args[0]}'. Choose one of: {kinds}", file=sys.stderr)
            return 2

    print_library(app_state)
    app_state.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
