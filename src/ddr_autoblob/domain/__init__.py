"""Domain layer: configuration models for the generator."""

from . import models

__all__ = ["models"]
