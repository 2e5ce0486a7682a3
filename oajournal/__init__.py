from oajournal._version import __version__
from oajournal._version import __version_tuple__
from oajournal.api import get_journal_info
from oajournal.api import get_journals_info
from oajournal.client.search import search_sources
from oajournal.core.config import config
from oajournal.core.extract import extract
from oajournal.core.matching import select
from oajournal.core.normalize import normalize
from oajournal.core.response import JournalInfoList
from oajournal.logger import get_logger
from oajournal.logger import setup_logger
from oajournal.models import CandidateRecord
from oajournal.models import ResultSummary
from oajournal.models import TopicEntry

__all__ = [
    "__version__",
    "__version_tuple__",
    "get_journal_info",
    "get_journals_info",
    "search_sources",
    "config",
    "normalize",
    "select",
    "extract",
    "JournalInfoList",
    "CandidateRecord",
    "TopicEntry",
    "ResultSummary",
    "setup_logger",
    "get_logger",
]
