"""
Journal lookup API.

Resolves free-text journal names to OpenAlex sources:
- validate the name and the politeness configuration
- search the catalog for candidate sources
- pick the best candidate (exact name first, edit distance otherwise)
- summarize the chosen source
"""

from oajournal.client.search import search_sources
from oajournal.core.config import config as global_config
from oajournal.core.extract import extract
from oajournal.core.matching import select
from oajournal.core.response import JournalInfoList
from oajournal.exceptions import ConfigurationError
from oajournal.exceptions import ValidationError
from oajournal.logger import log_match
from oajournal.logger import log_no_candidates
from oajournal.models.summary import ResultSummary


def validate_journal(journal):
    """Check that ``journal`` is a single non-empty name.

    Raises
    ------
    ValidationError
        If the value is not a string or is blank.
    """
    if not isinstance(journal, str):
        raise ValidationError(
            "Argument 'journal' must be a single string",
            field="journal",
            value=type(journal).__name__,
        )
    if not journal.strip():
        raise ValidationError("Argument 'journal' must not be empty", field="journal")


def resolve_config(config=None, email=None):
    """Return the configuration for one call, with ``email`` applied.

    Raises
    ------
    ConfigurationError
        If no contact email is configured.
    """
    if config is None:
        config = global_config
    config = config.with_overrides(email=email)

    if not isinstance(config.get("email"), str) or not config.email.strip():
        raise ConfigurationError(
            "Be polite with OpenAlex API and provide a contact email "
            "(email=... or OPENALEX_EMAIL)",
            config_key="email",
        )
    return config


def _summarize(journal, config, search):
    candidates = search(journal, config)

    if not candidates:
        log_no_candidates(journal)
        return ResultSummary(journal=journal)

    index, method = select(journal, [record.display_name for record in candidates])
    record = candidates[index]
    log_match(journal, record.display_name, method, index, len(candidates))
    return ResultSummary(journal=journal, match=method, **extract(record))


def get_journal_info(journal, email=None, *, config=None, search=None):
    """Get OpenAlex metadata for a journal name.

    Parameters
    ----------
    journal : str
        Journal name to look up.
    email : str, optional
        Contact email for the OpenAlex polite pool. Overrides
        ``config.email`` for this call.
    config : JournalConfig, optional
        Configuration to use. If not provided, uses global config.
    search : callable, optional
        ``search(query, config)`` returning candidate records. Defaults to
        :func:`oajournal.client.search.search_sources`.

    Returns
    -------
    ResultSummary
        Summary of the best-matching source. Only ``journal`` is set when
        the search found nothing.

    Raises
    ------
    ValidationError
        If ``journal`` is not a single non-empty string.
    ConfigurationError
        If no contact email is available.
    """
    validate_journal(journal)
    config = resolve_config(config, email)
    return _summarize(journal, config, search or search_sources)


def get_journals_info(journals, email=None, *, config=None, search=None):
    """Get OpenAlex metadata for several journal names.

    Every name is validated before the first search is made.

    Parameters
    ----------
    journals : list or tuple of str
        Journal names to look up.
    email, config, search
        As for :func:`get_journal_info`.

    Returns
    -------
    JournalInfoList
        One summary per name, in input order.
    """
    if not isinstance(journals, (list, tuple)):
        raise ValidationError(
            "Argument 'journals' must be a list of strings",
            field="journals",
            value=type(journals).__name__,
        )
    for journal in journals:
        validate_journal(journal)

    config = resolve_config(config, email)
    search = search or search_sources

    return JournalInfoList(_summarize(journal, config, search) for journal in journals)
