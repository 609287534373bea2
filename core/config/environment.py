"""
Environment Configuration Module

Loads environment variables for the requirement-to-test-case pipeline.
Generation profiles (which optional categories to emit) live in YAML files
and are loaded through GenerationOptions.from_yaml.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from the repository .env file if it exists
_env_path = Path(__file__).parent.parent.parent / '.env'
if _env_path.exists():
    load_dotenv(dotenv_path=_env_path)


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class EnvironmentConfig:
    """Environment configuration loaded from environment variables."""
    log_level: str = "INFO"
    default_priority: str = "medium"
    output_dir: str = "output"
    test_environment: str = "Test Environment"
    min_item_length: int = 6
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'EnvironmentConfig':
        """Create config from REQ2TEST_* environment variables."""
        return cls(
            log_level=os.getenv("REQ2TEST_LOG_LEVEL", "INFO").upper(),
            default_priority=os.getenv("REQ2TEST_DEFAULT_PRIORITY", "medium").lower(),
            output_dir=os.getenv("REQ2TEST_OUTPUT_DIR", "output"),
            test_environment=os.getenv("REQ2TEST_ENVIRONMENT", "Test Environment"),
            min_item_length=_get_int("REQ2TEST_MIN_ITEM_LENGTH", 6),
            log_file=os.getenv("REQ2TEST_LOG_FILE") or None,
        )

    @property
    def logging_level(self) -> int:
        """Numeric logging level; unknown names fall back to INFO."""
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO
