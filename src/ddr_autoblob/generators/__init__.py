"""C file generators."""

from .c_file_generator import BANNER, CFileGenerator

__all__ = ["BANNER", "CFileGenerator"]
