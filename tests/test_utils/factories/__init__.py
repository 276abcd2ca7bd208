from tests.test_utils.factories.pages import SAMPLE_BASE_URL, SAMPLE_LAST_MOD, FullPageEntryFactory, PageEntryFactory

__all__ = [
    "SAMPLE_BASE_URL",
    "SAMPLE_LAST_MOD",
    "FullPageEntryFactory",
    "PageEntryFactory",
]
