from .supervisor import ConnectionSupervisor
from .transport import safe_send, close_writer

__all__ = ["ConnectionSupervisor", "close_writer", "safe_send"]
