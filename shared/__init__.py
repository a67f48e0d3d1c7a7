"""
Cryptex Shared Module
=====================

Common utilities, configuration management, logging and console output
shared across the Cryptex toolkit modules.
"""

from shared.config import BreakerConfig, CryptexConfig, GlobalConfig

__all__ = ["BreakerConfig", "CryptexConfig", "GlobalConfig"]
