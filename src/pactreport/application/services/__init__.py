"""Application services."""

from pactreport.application.services.merger import MergeDecision, MergeResult, merge_documents

__all__ = ["MergeDecision", "MergeResult", "merge_documents"]
