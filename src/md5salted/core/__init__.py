"""Configuration for the md5salted package."""

from .config import HashingConfig

__all__ = ["HashingConfig"]
