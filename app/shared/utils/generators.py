"""Primary keys for ORM rows: CUID2, the id format the task service writes."""

from collections.abc import Callable

from cuid2 import cuid_wrapper

_next_cuid: Callable[[], str] = cuid_wrapper()


def generate_cuid() -> str:
    return _next_cuid()
