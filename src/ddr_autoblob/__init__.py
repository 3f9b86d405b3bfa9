"""DDR Autoblob - generates the C file that includes every configured header."""

from .domain.models import Configuration, ConfigurationError, load_configuration
from .generators import CFileGenerator
from .infrastructure.config import Config
from .main import main

__all__ = [
    "CFileGenerator",
    "Config",
    "Configuration",
    "ConfigurationError",
    "load_configuration",
    "main",
]
