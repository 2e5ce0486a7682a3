"""Response classes for journal lookups."""

from oajournal.models.summary import SUMMARY_COLUMNS


class JournalInfoList(list):
    """A list of ResultSummary objects, one per looked-up journal.

    Arguments:
        results: an iterable of ResultSummary objects

    Returns:
        a JournalInfoList object
    """

    def to_records(self):
        """Return every summary as a flat dict, in list order."""
        return [summary.to_row() for summary in self]

    def to_dataframe(self):
        """Convert the summaries to a pandas DataFrame.

        Returns
        -------
        pd.DataFrame
            One row per journal, with the full column set even when the
            list is empty.
        """
        import pandas as pd

        return pd.DataFrame(self.to_records(), columns=SUMMARY_COLUMNS)
