"""Reporters for discovered resources.

PlainTextReporter and JSONReporter use stdlib only.
ConsoleReporter renders rich tables.
"""

from localekeys.application.reporters._base import BaseReporter
from localekeys.application.reporters.console import ConsoleConfig, ConsoleReporter
from localekeys.application.reporters.json_reporter import JSONReporter
from localekeys.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
