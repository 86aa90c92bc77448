"""
Script di esecuzione dell'Issue Key Auto-Linker.

Legge:
  - il file di settings (AUTOLINKER_SETTINGS_FILE, default data.json)
  - un file HTML renderizzato (primo argomento)

Produce:
  - l'HTML con le issue key trasformate in link (secondo argomento, o stdout)

Uso:
  python run_autolinker.py input.html [output.html]
"""
import logging
import sys
from pathlib import Path

from autolinker.config.settings import AUTOLINKER_SETTINGS_FILE, LOG_LEVEL
from autolinker.rendering.post_processor import IssueLinkPostProcessor

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("run_autolinker")


def main(argv: list) -> int:
    if not argv:
        print(__doc__, file=sys.stderr)
        return 2

    input_file = Path(argv[0])
    output_file = Path(argv[1]) if len(argv) > 1 else None

    # -----------------------------------------------------------------------
    # Load settings
    # -----------------------------------------------------------------------
    logger.info("Settings file     : %s", AUTOLINKER_SETTINGS_FILE)
    processor = IssueLinkPostProcessor()
    snapshot = processor.load()
    logger.info("registrations     : %d", len(snapshot.registrations))

    # -----------------------------------------------------------------------
    # Link
    # -----------------------------------------------------------------------
    with open(input_file, encoding="utf-8") as f:
        html = f.read()
    logger.info("input             : %s (%d chars)", input_file, len(html))

    linked = processor.process_html(html)
    logger.info("changed           : %s", linked != html)

    # -----------------------------------------------------------------------
    # Save
    # -----------------------------------------------------------------------
    if output_file is None:
        sys.stdout.write(linked)
    else:
        with open(output_file, "w", encoding="utf-8") as f:
            f.write(linked)
        logger.info("Output salvato in: %s", output_file)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
