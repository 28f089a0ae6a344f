"""Settings Manager - Handles API key, cache location and provider configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from the process environment, seeded from a .env file in
    the project root.
    """

    DEFAULT_CACHE_DIR = Path.home() / ".street_translator"

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        return self._get("GEMINI_API_KEY")

    def get_gemini_model(self) -> Optional[str]:
        """Optional override of the Gemini model name."""
        return self._get("GEMINI_MODEL")

    def get_mymemory_email(self) -> Optional[str]:
        """Contact email sent to MyMemory, which raises the free daily quota."""
        return self._get("MYMEMORY_EMAIL")

    def get_cache_dir(self) -> Path:
        """Directory holding the persistent translation cache."""
        configured = self._get("STREET_TRANSLATOR_CACHE_DIR")
        return Path(configured).expanduser() if configured else self.DEFAULT_CACHE_DIR

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
