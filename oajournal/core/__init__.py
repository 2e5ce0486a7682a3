"""Core module for oajournal."""

from .config import JournalConfig
from .config import config
from .extract import extract
from .extract import select_topics
from .matching import edit_distance
from .matching import select
from .normalize import normalize
from .response import JournalInfoList

__all__ = [
    "JournalConfig",
    "config",
    "normalize",
    "select",
    "edit_distance",
    "extract",
    "select_topics",
    "JournalInfoList",
]
