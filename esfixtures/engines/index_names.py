"""Index and type names derived from fixture file names.

The naming convention is positional and purely textual:

* ``orders.json``        → index ``orders``
* ``widget_index.json``  → index ``widget_index``, inner type ``widget``

Nothing here checks that the service actually follows that convention.
"""

INDEX_SUFFIX = "_index"


def file_extension(file_name: str) -> str:
    """Text from the last dot of *file_name*, or ``""`` when there is none."""
    dot = file_name.rfind(".")
    return file_name[dot:] if dot >= 0 else ""


def index_name_for(file_name: str) -> str:
    """Target index for a fixture file.

    The extension is removed by literal substring replacement of its first
    occurrence, so ``"a.json.json"`` becomes ``"a.json"``.
    """
    extension = file_extension(file_name)
    if not extension:
        return file_name
    return file_name.replace(extension, "", 1)


def inner_type_for(index_name: str) -> str:
    """Mapping type used by the single-document fallback.

    Everything before the first ``"_index"``; the whole name when the
    substring is absent. ``"_index"`` itself yields ``""``.

    Examples:
        >>> inner_type_for("widget_index")
        'widget'
        >>> inner_type_for("plainindex")
        'plainindex'
    """
    return index_name.split(INDEX_SUFFIX)[0]
