import sys
from pathlib import Path

from graveyard.config.settings import Settings
from graveyard.database.connection import close_pool, init_pool
from graveyard.ingestion.exceptions import IngestionError, InvalidJsonError
from graveyard.logging.logger import Log
from graveyard.submission.exceptions import SubmissionError
from graveyard.submission.messages import user_message
from graveyard.submission.models import Submitter
from graveyard.submission.processor import build_processor

USAGE = "usage: graveyard-submit <PlayerSave.json> <user-id> [character-name]"


def main(argv: list[str]) -> int:
    """Submit one save file: configure -> open pool -> run pipeline -> report."""
    if len(argv) < 2:
        print(USAGE, file=sys.stderr)
        return 2

    save_path = Path(argv[0])
    submitter = Submitter(user_id=argv[1])
    character_name = argv[2] if len(argv) > 2 else None

    settings = Settings()
    Log.configure(settings.log_level)

    try:
        # utf-8-sig drops a leading BOM, matching what a browser upload reads.
        raw_text = save_path.read_text(encoding="utf-8-sig")
    except OSError as exc:
        Log.error(f"Cannot read save file {save_path}: {exc}")
        return 1
    except UnicodeDecodeError as exc:
        error = InvalidJsonError(f"Save file is not valid UTF-8 text: {exc.reason}")
        Log.warning(f"Submission rejected: {error}", code=error.code)
        print(user_message(error), file=sys.stderr)
        return 1

    init_pool(settings)
    try:
        processor = build_processor(settings)
        result = processor.submit(raw_text, submitter, character_name)
    except (IngestionError, SubmissionError) as exc:
        print(user_message(exc), file=sys.stderr)
        return 1
    finally:
        close_pool()

    print(user_message(result))
    return 0


def run() -> None:
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
