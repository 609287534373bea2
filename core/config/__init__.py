"""
Configuration management - externalized and extensible.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from core.config.environment import EnvironmentConfig
from core.domain.options import GenerationOptions


@dataclass(frozen=True)
class OutputConfig:
    """Output configuration."""
    output_dir: str
    format: str = "all"  # csv, json, html, both (csv + json), all

    @classmethod
    def default(cls, env: Optional[EnvironmentConfig] = None) -> 'OutputConfig':
        """Create default output configuration."""
        env = env or EnvironmentConfig.from_env()
        return cls(output_dir=env.output_dir)


@dataclass(frozen=True)
class AppConfig:
    """Application-wide configuration."""
    environment: EnvironmentConfig
    generation: GenerationOptions
    output: OutputConfig

    @classmethod
    def load(cls, profile: Optional[Union[str, Path]] = None) -> 'AppConfig':
        """Load application configuration.

        Args:
            profile: Optional YAML generation profile

        Returns:
            AppConfig built from the environment and the profile
        """
        env = EnvironmentConfig.from_env()
        defaults = GenerationOptions.from_dict({"priority": env.default_priority})
        generation = GenerationOptions.from_yaml(profile, defaults=defaults) if profile else defaults
        return cls(environment=env, generation=generation, output=OutputConfig.default(env))


__all__ = ['AppConfig', 'EnvironmentConfig', 'OutputConfig']
