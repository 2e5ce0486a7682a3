"""
Tests for the journal lookup API.

The catalog search is replaced with an in-memory fake.
"""

import pytest

from oajournal.api import get_journal_info
from oajournal.api import get_journals_info
from oajournal.core.config import JournalConfig
from oajournal.core.config import config as global_config
from oajournal.core.config import load_config
from oajournal.core.response import JournalInfoList
from oajournal.exceptions import ConfigurationError
from oajournal.exceptions import ValidationError
from oajournal.models.source import CandidateRecord
from oajournal.models.summary import SUMMARY_COLUMNS

EMAIL = "someone@example.org"

APPLIED_VEGETATION_SCIENCE = {
    "id": "https://openalex.org/S59127458",
    "display_name": "Applied Vegetation Science",
    "works_count": 2451,
    "issn_l": "1402-2001",
    "issn": ["1402-2001"],
    "host_organization_name": "Wiley",
    "country_code": "US",
    "topics": [
        {"type": "topic", "display_name": "Plant Community Assembly", "count": 50}
    ],
}


class FakeSearch:
    """Search collaborator returning canned records per query."""

    def __init__(self, records=None, by_query=None):
        self.records = records or []
        self.by_query = by_query or {}
        self.calls = []

    def __call__(self, query, config):
        self.calls.append((query, config))
        raw = self.by_query.get(query, self.records)
        return [CandidateRecord.model_validate(record) for record in raw]


@pytest.fixture
def polite_config():
    return load_config().with_overrides(email=EMAIL)


class TestGetJournalInfo:
    """Tests for get_journal_info."""

    def test_exact_match_end_to_end(self, polite_config):
        search = FakeSearch([APPLIED_VEGETATION_SCIENCE])
        info = get_journal_info(
            "Applied Vegetation Science", config=polite_config, search=search
        )

        assert info.journal == "Applied Vegetation Science"
        assert info.match == "exact"
        assert info.oa_source_name == "Applied Vegetation Science"
        assert info.oa_source_id == "https://openalex.org/S59127458"
        assert info.oa_source_issn == "1402-2001"
        assert info.oa_topic == "Plant Community Assembly"
        assert info.oa_subfield is None

    def test_no_candidates(self, polite_config):
        search = FakeSearch([])
        info = get_journal_info(
            "Nonexistent Journal Xyz", config=polite_config, search=search
        )
        row = info.to_row()

        assert row["journal"] == "Nonexistent Journal Xyz"
        assert row["match"] is None
        assert all(row[column] is None for column in SUMMARY_COLUMNS if column.startswith("oa_"))
        assert search.calls[0][0] == "Nonexistent Journal Xyz"

    def test_distance_match(self, polite_config):
        search = FakeSearch(
            [
                {"id": "https://openalex.org/S1", "display_name": "Applied Veg Science"},
                {"id": "https://openalex.org/S2", "display_name": "Applied Vegetation Sci"},
            ]
        )
        info = get_journal_info(
            "Applied Vegetation Science", config=polite_config, search=search
        )

        assert info.match == "distance"
        assert info.oa_source_id == "https://openalex.org/S2"
        assert info.oa_source_issn == ""

    def test_extractor_uses_original_name(self, polite_config):
        search = FakeSearch(
            [{"id": "https://openalex.org/S1", "display_name": "OIKOS: A Journal"}]
        )
        info = get_journal_info("oikos a journal", config=polite_config, search=search)

        assert info.match == "exact"
        assert info.oa_source_name == "OIKOS: A Journal"

    @pytest.mark.parametrize("journal", [None, 42, ["Oikos"], ("Oikos",), "", "   "])
    def test_invalid_journal(self, polite_config, journal):
        search = FakeSearch([APPLIED_VEGETATION_SCIENCE])

        with pytest.raises(ValidationError) as exc_info:
            get_journal_info(journal, config=polite_config, search=search)

        assert exc_info.value.field == "journal"
        assert search.calls == []

    def test_missing_email(self):
        search = FakeSearch([APPLIED_VEGETATION_SCIENCE])

        with pytest.raises(ConfigurationError, match="Be polite") as exc_info:
            get_journal_info("Oikos", config=JournalConfig(email=None), search=search)

        assert exc_info.value.config_key == "email"
        assert search.calls == []

    def test_blank_email(self):
        search = FakeSearch([])

        with pytest.raises(ConfigurationError):
            get_journal_info("Oikos", email="  ", config=JournalConfig(), search=search)

    def test_invalid_journal_checked_before_email(self):
        with pytest.raises(ValidationError):
            get_journal_info("", config=JournalConfig(email=None), search=FakeSearch())

    def test_email_argument_is_threaded_to_search(self):
        base = JournalConfig(email=None)
        search = FakeSearch([])

        get_journal_info("Oikos", email=EMAIL, config=base, search=search)

        assert search.calls[0][1].email == EMAIL
        assert base.email is None

    def test_global_config_not_mutated(self):
        before = dict(global_config)
        get_journal_info("Oikos", email="other@example.org", search=FakeSearch([]))
        assert dict(global_config) == before


class TestGetJournalsInfo:
    """Tests for the batch lookup."""

    def test_rows_in_input_order(self, polite_config):
        search = FakeSearch(
            by_query={"Applied Vegetation Science": [APPLIED_VEGETATION_SCIENCE]}
        )
        results = get_journals_info(
            ["Nonexistent Journal Xyz", "Applied Vegetation Science"],
            config=polite_config,
            search=search,
        )

        assert isinstance(results, JournalInfoList)
        assert [info.journal for info in results] == [
            "Nonexistent Journal Xyz",
            "Applied Vegetation Science",
        ]
        assert [info.match for info in results] == [None, "exact"]

    def test_to_dataframe(self, polite_config):
        search = FakeSearch([APPLIED_VEGETATION_SCIENCE])
        df = get_journals_info(
            ["Applied Vegetation Science"], config=polite_config, search=search
        ).to_dataframe()

        assert list(df.columns) == SUMMARY_COLUMNS
        assert df.loc[0, "oa_source_issn_l"] == "1402-2001"
        assert df.loc[0, "oa_works_count"] == 2451

    def test_empty_batch_dataframe(self, polite_config):
        df = get_journals_info([], config=polite_config, search=FakeSearch()).to_dataframe()

        assert df.empty
        assert list(df.columns) == SUMMARY_COLUMNS

    def test_invalid_entry_fails_before_search(self, polite_config):
        search = FakeSearch([APPLIED_VEGETATION_SCIENCE])

        with pytest.raises(ValidationError):
            get_journals_info(["Oikos", ""], config=polite_config, search=search)

        assert search.calls == []

    def test_not_a_list(self, polite_config):
        with pytest.raises(ValidationError) as exc_info:
            get_journals_info("Oikos", config=polite_config, search=FakeSearch())

        assert exc_info.value.field == "journals"
