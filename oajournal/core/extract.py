"""Extraction of a fixed-shape summary from a chosen source record."""

ISSN_SEPARATOR = " | "

TOPIC_FIELDS = ("oa_topic", "oa_subfield", "oa_field")


def _argmax(values):
    """Index of the first maximum, or None for an empty sequence."""
    if not values:
        return None
    return max(range(len(values)), key=values.__getitem__)


def _group(topics, topic_type):
    return [entry for entry in topics if entry.type == topic_type]


def select_topics(topics):
    """Select the dominant topic, subfield and field of a source.

    The topic is the entry of type ``"topic"`` with the highest count and
    the subfield the ``"subfield"`` entry with the highest count. The
    field is taken at the position of the selected subfield inside the
    ``"field"`` group rather than from an arg-max of its own; with
    flattened catalog topics this is the field of that same topic.

    Nothing is selected when no entry of type ``"topic"`` exists.

    Parameters
    ----------
    topics : list of TopicEntry
        Tagged topic entries of one source.

    Returns
    -------
    dict
        ``oa_topic``, ``oa_subfield`` and ``oa_field`` display names, each
        None when unavailable.
    """
    selected = dict.fromkeys(TOPIC_FIELDS)

    topic_group = _group(topics, "topic")
    if not topic_group:
        return selected

    subfield_group = _group(topics, "subfield")
    field_group = _group(topics, "field")

    topic_index = _argmax([entry.count for entry in topic_group])
    selected["oa_topic"] = topic_group[topic_index].display_name

    subfield_index = _argmax([entry.count for entry in subfield_group])
    if subfield_index is None:
        return selected
    selected["oa_subfield"] = subfield_group[subfield_index].display_name

    if subfield_index < len(field_group):
        selected["oa_field"] = field_group[subfield_index].display_name

    return selected


def extract(record):
    """Map a candidate record onto the ``oa_*`` summary fields.

    Parameters
    ----------
    record : CandidateRecord
        The selected source, as returned by the search.

    Returns
    -------
    dict
        All ten ``oa_*`` fields. Missing optional values stay None;
        ``oa_source_issn`` is the ``" | "``-joined ISSN list and is an
        empty string when the list is empty.
    """
    fields = {
        "oa_source_name": record.display_name,
        "oa_source_id": record.id,
        "oa_works_count": record.works_count,
        "oa_source_issn_l": record.issn_l,
        "oa_source_issn": ISSN_SEPARATOR.join(record.issn),
        "oa_publisher_name": record.host_organization_name,
        "oa_country": record.country_code,
    }
    fields.update(select_topics(record.topics))
    return fields
