"""The external procedure behind ``recipebox reset-data``."""

import subprocess
from typing import List, Optional

from .config import Settings
from .errors import ResetError
from .logger import get_logger

logger = get_logger("reset")


class ResetProcedure:
    """Runs the configured reset command in a separate process.

    The command is opaque to recipebox: it is expected to rewrite the data
    file wholesale (the default, ``python -m recipebox.seed``, does so with
    an atomic replace) and to signal failure through its exit status.
    """

    def __init__(self, command: Optional[List[str]] = None):
        self.command = command or Settings.from_env().reset_command

    def run(self) -> None:
        """Run the reset command, raising ResetError if it fails."""
        logger.info(f"Running reset command: {' '.join(self.command)}")
        try:
            subprocess.run(self.command, check=True)
        except subprocess.CalledProcessError as e:
            logger.error(f"Reset command exited with status {e.returncode}")
            raise ResetError(f"command exited with status {e.returncode}") from e
        except OSError as e:
            logger.error(f"Reset command could not be started: {e}")
            raise ResetError(str(e)) from e
