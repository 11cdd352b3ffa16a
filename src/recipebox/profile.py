"""Profile management for recipebox storage and logs."""

from pathlib import Path
from typing import Optional

from .config import APP_NAME, Settings


class Profile:
    """Manages profile-specific paths for recipebox storage.

    A profile determines where recipebox keeps its data and logs. The active
    profile comes from RECIPEBOX_PROFILE, defaulting to "default". Setting
    RECIPEBOX_DATA_DIR points the profile at an explicit directory instead
    of ``<project root>/data/<profile>``.
    """

    def __init__(self, name: Optional[str] = None, data_root: Optional[Path] = None):
        """Initialize profile with given name or from settings.

        Args:
            name: Profile name. If None, uses RECIPEBOX_PROFILE or "default".
            data_root: Explicit data directory. If None, uses RECIPEBOX_DATA_DIR
                or the project's ``data/<name>`` directory.
        """
        settings = Settings.from_env()
        self.name = name or settings.profile
        if data_root is None:
            data_root = settings.data_dir
        if data_root is None:
            data_root = self._find_project_root() / "data" / self.name
        self._data_root = Path(data_root)

        self._ensure_directories()

    def _find_project_root(self) -> Path:
        """Find project root by looking for pyproject.toml or .git."""
        current = Path(__file__).resolve().parent

        while current != current.parent:
            if (current / "pyproject.toml").exists() or (current / ".git").exists():
                return current
            current = current.parent

        # Installed outside a checkout: fall back to the working directory
        return Path.cwd()

    def _ensure_directories(self) -> None:
        """Create profile directories if they don't exist."""
        self.data_root.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)
        self.vault_root.mkdir(parents=True, exist_ok=True)

    @property
    def data_root(self) -> Path:
        """Root directory for profile data."""
        return self._data_root

    @property
    def vault_root(self) -> Path:
        """Root directory for vault storage."""
        return self._data_root / "vault"

    @property
    def logs_dir(self) -> Path:
        """Directory for log files."""
        return self._data_root / "logs"

    @property
    def log_file(self) -> Path:
        """Path to the main log file."""
        return self.logs_dir / f"{APP_NAME}.log"

    @classmethod
    def current(cls) -> "Profile":
        """Get the current active profile."""
        return cls()

    def __str__(self) -> str:
        return f"Profile({self.name})"

    def __repr__(self) -> str:
        return f"Profile(name={self.name!r}, data_root={self._data_root!s})"
