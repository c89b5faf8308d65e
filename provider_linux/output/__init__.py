"""
provider-linux - Output Formatters

This package renders provider reports for display.
"""

from .json_formatter import JSONFormatter, DateTimeEncoder
from .text_formatter import TextFormatter

__all__ = [
    "JSONFormatter",
    "DateTimeEncoder",
    "TextFormatter",
]
