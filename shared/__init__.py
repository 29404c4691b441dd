"""
Scytale Shared Module
=====================

Configuration, logging, console and statistics utilities shared by the
cipher, analyzer and CLI layers of Scytale.
"""

from shared.config import ScytaleConfig, get_config

__all__ = ["ScytaleConfig", "get_config"]
