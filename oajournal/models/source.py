"""Source record models validated at the search boundary."""

from typing import Any
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

TOPIC_LEVELS = ("subfield", "field")


class TopicEntry(BaseModel):
    """One level of a source's subject classification."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: Literal["topic", "subfield", "field"]
    display_name: str | None = None
    count: int = Field(default=0, ge=0)


def flatten_topic(topic: dict[str, Any]) -> list[dict[str, Any]]:
    """Expand a catalog topic into tagged topic, subfield and field entries.

    Every entry carries the count of the topic itself. Subfield and field
    are added together or not at all so both groups stay aligned with the
    topics. The domain level is not kept.
    """
    count = topic.get("count") or 0
    entries = [
        {"type": "topic", "display_name": topic.get("display_name"), "count": count}
    ]
    parents = [topic.get(level) for level in TOPIC_LEVELS]
    if all(parents):
        entries.extend(
            {"type": level, "display_name": parent.get("display_name"), "count": count}
            for level, parent in zip(TOPIC_LEVELS, parents)
        )
    return entries


class CandidateRecord(BaseModel):
    """A source returned by a catalog search."""

    model_config = ConfigDict(extra="allow")

    id: str
    display_name: str = ""
    works_count: int = Field(default=0, ge=0)
    issn_l: str | None = None
    issn: list[str] = Field(default_factory=list)
    host_organization_name: str | None = None
    country_code: str | None = None
    topics: list[TopicEntry] = Field(default_factory=list)

    @field_validator("display_name", mode="before")
    @classmethod
    def _none_display_name(cls, value):
        return "" if value is None else value

    @field_validator("works_count", mode="before")
    @classmethod
    def _none_works_count(cls, value):
        return 0 if value is None else value

    @field_validator("issn", mode="before")
    @classmethod
    def _none_issn(cls, value):
        return [] if value is None else value

    @field_validator("topics", mode="before")
    @classmethod
    def _flatten_topics(cls, value):
        if value is None:
            return []
        entries = []
        for topic in value:
            if isinstance(topic, dict) and "type" not in topic:
                entries.extend(flatten_topic(topic))
            else:
                entries.append(topic)
        return entries
