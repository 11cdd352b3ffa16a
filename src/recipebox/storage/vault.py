import os
import tempfile
from pathlib import Path
from typing import Any, Optional

import yaml

from ..profile import Profile


class AppVault:
    """YAML document storage context for a specific app.

    - Documents are parsed on read and serialized on write.
    - Every write lands in a temporary file next to the target and is moved
      into place with ``os.replace``, so readers see either the old document
      or the new one, never a partial write.
    - Files are stored under ``<data root>/vault/<app_name>/...``.
    """

    def __init__(self, app_name: str, vault_root: Path):
        self.app_name = app_name
        self.vault_root = vault_root
        self.app_root = vault_root / app_name
        self._yaml_extensions = {'.yml', '.yaml'}

        # Create app directory if needed
        self.app_root.mkdir(parents=True, exist_ok=True)

    def _validate_path(self, path: str) -> Path:
        """Validate and resolve path within app's vault."""
        clean_path = Path(path)

        # Check for path traversal attempts
        try:
            full_path = (self.app_root / clean_path).resolve()
            full_path.relative_to(self.app_root.resolve())
        except (ValueError, RuntimeError):
            raise ValueError(f"Invalid path: {path}")

        if full_path.suffix not in self._yaml_extensions:
            raise ValueError(f"Unsupported file type: {path}")

        return full_path

    def _atomic_write(self, full_path: Path, output: str) -> None:
        """Write ``output`` to a sibling temp file, then swap it in."""
        full_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{full_path.name}.", suffix=".tmp", dir=full_path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(output)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, full_path)
        except BaseException:
            # Leave the previous document untouched
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def write(self, path: str, content: Any) -> None:
        """Serialize ``content`` as YAML and write it to ``path``."""
        full_path = self._validate_path(path)
        output = yaml.safe_dump(content, default_flow_style=False, sort_keys=False, allow_unicode=True)
        self._atomic_write(full_path, output)

    def read(self, path: str) -> Any:
        """Read and parse the YAML document at ``path``."""
        full_path = self._validate_path(path)

        if not full_path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        content = full_path.read_text(encoding='utf-8')
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}")

    def exists(self, path: str) -> bool:
        """Check if a file exists."""
        try:
            return self._validate_path(path).exists()
        except ValueError:
            return False


class Vault:
    """Main document storage interface for recipebox."""

    def __init__(self, profile: Optional[Profile] = None):
        self.profile = profile or Profile.current()
        self.vault_root = self.profile.vault_root
        self.vault_root.mkdir(parents=True, exist_ok=True)

    @classmethod
    def for_app(cls, app_name: str, profile: Optional[Profile] = None) -> AppVault:
        """Get a vault context for a specific app."""
        vault = cls(profile)
        return AppVault(app_name, vault.vault_root)
