from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, Mapping


def _field(item: Any, prop: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(prop)
    return getattr(item, prop, None)


def post_sorter(prop: str, reverse: bool = False) -> Callable[[Any, Any], int]:
    """
    Build a cmp-style comparator on `prop`, ascending unless `reverse`.

    Values that cannot be ordered against each other tie, so a stable sort
    leaves them where they were.
    """
    direction = -1 if reverse else 1

    def compare(a: Any, b: Any) -> int:
        left, right = _field(a, prop), _field(b, prop)
        try:
            if left > right:
                return direction
            if left < right:
                return -direction
        except TypeError:
            return 0
        return 0

    return compare


def sort_posts(
    posts: Iterable[Any], prop: str = "created", reverse: bool = False
) -> List[Any]:
    return sorted(posts, key=cmp_to_key(post_sorter(prop, reverse)))
