from typing import List, Sequence, TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, limit: int) -> List[T]:
    """
    Return one page of items.

    Args:
        items: The full ordered sequence
        page: 1-based page number
        limit: Maximum number of items per page

    Returns:
        The slice [(page-1)*limit, min(page*limit, len(items))), empty when the
        page lies past the end
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    if limit < 1:
        raise ValueError("limit must be >= 1")

    start = (page - 1) * limit
    if start >= len(items):
        return []
    return list(items[start:start + limit])
