"""Application settings for the input C file generator."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Config:
    """Settings for a single generator run."""

    config_file: Path
    output_file: Path
    override_file: Optional[Path] = None
    verbose: bool = False
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load settings from environment variables or a .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        config_file_str = os.getenv("AUTOBLOB_CONFIG_FILE", "")
        output_file_str = os.getenv("AUTOBLOB_OUTPUT_FILE", "")
        override_file_str = os.getenv("AUTOBLOB_OVERRIDE_FILE", "")
        log_dir_str = os.getenv("AUTOBLOB_LOG_DIR", "")
        verbose_str = os.getenv("AUTOBLOB_VERBOSE", "false").lower()

        return cls(
            config_file=Path(config_file_str),
            output_file=Path(output_file_str),
            override_file=Path(override_file_str) if override_file_str else None,
            verbose=verbose_str in ("true", "1", "yes"),
            log_dir=Path(log_dir_str) if log_dir_str else None,
        )

    @classmethod
    def from_args(
        cls,
        config_file: Optional[Path] = None,
        output_file: Optional[Path] = None,
        override_file: Optional[Path] = None,
        verbose: Optional[bool] = None,
        log_dir: Optional[Path] = None,
    ) -> "Config":
        """
        Create settings from explicit arguments, falling back to environment.

        Args:
            config_file: Path to the autoblob configuration (overrides env)
            output_file: Path of the C file to generate (overrides env)
            override_file: Optional override configuration (overrides env)
            verbose: Enable verbose output (overrides env)
            log_dir: Directory for log files (overrides env)

        Returns:
            Config object
        """
        config = cls.from_env()

        if config_file is not None:
            config.config_file = config_file
        if output_file is not None:
            config.output_file = output_file
        if override_file is not None:
            config.override_file = override_file
        if verbose is not None:
            config.verbose = verbose
        if log_dir is not None:
            config.log_dir = log_dir

        return config

    def validate(self) -> None:
        """
        Validate the settings.

        Raises:
            ValueError: If the configuration files are missing
        """
        if not self.config_file.exists():
            raise ValueError(
                f"Specified config file: {self.config_file.absolute()} does not exist"
            )

        if not self.config_file.is_file():
            raise ValueError(f"Not a file: {self.config_file.absolute()}")

        if self.override_file is not None and not self.override_file.is_file():
            raise ValueError(
                f"Specified override file: {self.override_file.absolute()} does not exist"
            )
