from __future__ import annotations

from tests.test_utils.strategies.pages import (
    invalid_priorities,
    page_name_lists,
    page_name_strategy,
    valid_priorities,
)

__all__ = [
    "invalid_priorities",
    "page_name_lists",
    "page_name_strategy",
    "valid_priorities",
]
