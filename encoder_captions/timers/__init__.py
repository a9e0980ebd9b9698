from .periodic import PeriodicTask
from .silence import SilenceMonitor
from .reconnect import ReconnectTimer
from .keepalive import KeepAliveEmitter

__all__ = ["KeepAliveEmitter", "PeriodicTask", "ReconnectTimer", "SilenceMonitor"]
