"""Table formatter for journal lookup results."""

from typing import Any

from rich.table import Table as RichTable

MAX_WIDTH = 300

MATCH_STYLES = {
    "exact": "green",
    "distance": "yellow",
}


class SummaryTableFormatter:
    """Formatter rendering ResultSummary rows as a Rich table."""

    def __init__(self, max_width: int = MAX_WIDTH):
        """Initialize formatter with max column width."""
        self.max_width = max_width

    def get_field_names(self) -> list[str]:
        """Return the list of column headers."""
        return [
            "Journal",
            "Match",
            "Source Name",
            "ID",
            "Works",
            "ISSN-L",
            "Publisher",
            "Country",
            "ISSN",
            "Topic",
            "Subfield",
            "Field",
        ]

    def extract_row_data(self, result: dict[str, Any]) -> list[Any]:
        """Extract data from a single summary row for the table."""
        source_id = result.get("oa_source_id") or ""
        works_count = result.get("oa_works_count")

        return [
            (result.get("journal") or "")[: self.max_width],
            result.get("match") or "none",
            (result.get("oa_source_name") or "")[: self.max_width],
            source_id.split("/")[-1],
            f"{works_count:,}" if works_count is not None else None,
            result.get("oa_source_issn_l"),
            result.get("oa_publisher_name"),
            result.get("oa_country"),
            result.get("oa_source_issn"),
            result.get("oa_topic"),
            result.get("oa_subfield"),
            result.get("oa_field"),
        ]

    def format_table(self, results: list[dict[str, Any]]) -> RichTable:
        """Create and populate a Rich table from summary rows."""
        table = RichTable(
            show_header=True,
            header_style="bold cyan",
            row_styles=None,
            show_lines=False,
        )

        for field in self.get_field_names():
            table.add_column(
                field,
                overflow=self._get_column_overflow(field),
                justify=self._get_column_justify(field),
            )

        for result in results:
            row = self.extract_row_data(result)
            table.add_row(
                *[self._stringify_cell(cell) for cell in row],
                style=self._get_row_style(result),
            )

        return table

    def _get_column_overflow(self, field: str) -> str:
        normalized = field.lower()
        if "name" in normalized or "journal" in normalized:
            return "fold"
        return "ellipsis"

    def _get_column_justify(self, field: str) -> str:
        return "right" if field == "Works" else "left"

    def _get_row_style(self, result: dict[str, Any]) -> str:
        return MATCH_STYLES.get(result.get("match"), "dim")

    @staticmethod
    def _stringify_cell(cell: Any) -> str:
        if cell is None:
            return ""
        return str(cell)
