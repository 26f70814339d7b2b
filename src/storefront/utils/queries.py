"""Helpers for reading whole result sets through Protean querysets."""


def fetch_all(queryset) -> list:
    """Every record matching ``queryset``.

    Protean pages query results (100 records by default). When the first
    page does not hold the full match count, the query is re-run with a
    limit covering all of it.
    """
    results = queryset.all()
    if results.total > len(results.items):
        results = queryset.limit(results.total).all()
    return results.items
