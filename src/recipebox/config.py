"""Environment-driven settings for recipebox."""

import os
import shlex
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables at module import
load_dotenv()

APP_NAME = "recipebox"
DEFAULT_PROFILE = "default"


def _default_reset_command() -> List[str]:
    return [sys.executable, "-m", "recipebox.seed"]


@dataclass
class Settings:
    """Runtime settings, read from the environment (and ``.env``)."""

    profile: str = DEFAULT_PROFILE
    data_dir: Optional[Path] = None
    log_level: str = "DEBUG"
    reset_command: List[str] = field(default_factory=_default_reset_command)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from ``RECIPEBOX_*`` environment variables.

        - RECIPEBOX_PROFILE: profile name (default "default")
        - RECIPEBOX_DATA_DIR: data root, overrides the profile location
        - RECIPEBOX_LOG_LEVEL: level of the log file sink
        - RECIPEBOX_RESET_COMMAND: command line run by ``reset-data``
        """
        data_dir = os.getenv("RECIPEBOX_DATA_DIR")
        reset_command = os.getenv("RECIPEBOX_RESET_COMMAND")

        return cls(
            profile=os.getenv("RECIPEBOX_PROFILE") or DEFAULT_PROFILE,
            data_dir=Path(data_dir).expanduser() if data_dir else None,
            log_level=(os.getenv("RECIPEBOX_LOG_LEVEL") or "DEBUG").upper(),
            reset_command=shlex.split(reset_command) if reset_command else _default_reset_command(),
        )
