from tests.test_utils.fakes.transport import FakeTransport

__all__ = ["FakeTransport"]
