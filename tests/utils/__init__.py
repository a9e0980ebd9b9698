from .encoder import FakeEncoder
from .waiting import wait_until

__all__ = ["FakeEncoder", "wait_until"]
