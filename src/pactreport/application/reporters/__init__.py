"""Verification reporters.

JsonReporter persists the report document, ConsoleReporter prints progress.
Users can implement custom reporters on top of BaseVerifierReporter.
"""

from pactreport.application.reporters._base import BaseVerifierReporter
from pactreport.application.reporters._registry import available_reporters, create_reporter
from pactreport.application.reporters.console import ConsoleReporter
from pactreport.application.reporters.json_reporter import JsonReporter

__all__ = [
    "BaseVerifierReporter",
    "ConsoleReporter",
    "JsonReporter",
    "available_reporters",
    "create_reporter",
]
