"""Pydantic models for oajournal."""

from .source import CandidateRecord
from .source import TopicEntry
from .summary import SUMMARY_COLUMNS
from .summary import ResultSummary

__all__ = [
    "CandidateRecord",
    "TopicEntry",
    "ResultSummary",
    "SUMMARY_COLUMNS",
]
