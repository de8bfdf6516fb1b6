"""
Core module for alibigen.
Provides error handling and logging.
"""
from alibigen.core.errors import AlibiError, ConfigurationError, CNFError
from alibigen.core.logging import get_logger

__all__ = ["AlibiError", "ConfigurationError", "CNFError", "get_logger"]
