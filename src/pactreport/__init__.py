"""pactreport - JSON reporting sink for pact provider verification."""

__version__ = "0.1.0"

from pactreport.application.reporters import ConsoleReporter, JsonReporter, create_reporter
from pactreport.domain.model.configuration import ReporterConfig

__all__ = [
    "ConsoleReporter",
    "JsonReporter",
    "ReporterConfig",
    "__version__",
    "create_reporter",
]
