"""Digital rain in the terminal.

Run with: `python -m digirain` (or the `digirain` script) and press ESC to
quit.  Set ``DIGIRAIN_LOG`` to a file path to capture logs, and
``DIGIRAIN_LOG_LEVEL`` (e.g. ``DEBUG``) to change their verbosity.
"""

from __future__ import annotations

import logging
import os
import signal
import sys
from typing import Mapping, Optional

from .runner import RainRunner
from .terminal import Terminal


LOGGER = logging.getLogger(__name__)


def configure_logging(environ: Optional[Mapping[str, str]] = None) -> None:
    """Log to the file named by ``DIGIRAIN_LOG``, if any.

    The animation owns the screen, so no stream handler is installed.
    """

    environ = os.environ if environ is None else environ
    path = environ.get("DIGIRAIN_LOG")
    if not path:
        return
    level_name = environ.get("DIGIRAIN_LOG_LEVEL", "INFO")
    logging.basicConfig(
        filename=path,
        level=getattr(logging, level_name.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _terminate(signum, _frame) -> None:
    raise SystemExit(128 + signum)


def main() -> int:
    configure_logging()
    # Turn SIGTERM into SystemExit so the terminal guard still restores.
    signal.signal(signal.SIGTERM, _terminate)
    try:
        with Terminal() as terminal:
            RainRunner(terminal).run()
    except KeyboardInterrupt:
        LOGGER.info("Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
