from .frames import FrameResult
from .runtime import RuntimeDeps
from .connection import ConnectionPhase
from .status import StatusReport, ConnectionStatus
from .settings import AppSettings, SessionConfig, ServerSettings, TimingSettings

__all__ = [
    "AppSettings",
    "ConnectionPhase",
    "ConnectionStatus",
    "FrameResult",
    "RuntimeDeps",
    "ServerSettings",
    "SessionConfig",
    "StatusReport",
    "TimingSettings",
]
