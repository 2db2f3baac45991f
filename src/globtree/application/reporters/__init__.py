"""Reporters for compiled matcher trees.

ConsoleReporter renders with rich, JSONReporter uses stdlib json.
Users can implement custom reporters satisfying ReporterProtocol.
"""

from globtree.application.reporters.console import ConsoleConfig, ConsoleReporter
from globtree.application.reporters.json_reporter import JSONReporter, matcher_to_dict
from globtree.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "ReporterProtocol",
    "matcher_to_dict",
]
