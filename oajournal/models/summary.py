"""Output record of a journal lookup."""

from typing import Literal

from pydantic import BaseModel


class ResultSummary(BaseModel):
    """Summary of the catalog source matched to one journal name.

    Every field but ``journal`` is None until a candidate is matched.
    """

    journal: str
    match: Literal["exact", "distance"] | None = None
    oa_source_name: str | None = None
    oa_source_id: str | None = None
    oa_works_count: int | None = None
    oa_source_issn_l: str | None = None
    oa_source_issn: str | None = None
    oa_publisher_name: str | None = None
    oa_country: str | None = None
    oa_topic: str | None = None
    oa_subfield: str | None = None
    oa_field: str | None = None

    def to_row(self) -> dict:
        """Return the summary as a flat dict with a fixed key set."""
        return self.model_dump()


SUMMARY_COLUMNS = list(ResultSummary.model_fields)
