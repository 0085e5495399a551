"""Ports: contracts implemented outside the domain."""

from pactreport.domain.ports.reporter import VerifierReporterProtocol

__all__ = ["VerifierReporterProtocol"]
