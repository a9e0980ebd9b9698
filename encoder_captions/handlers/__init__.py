from .config_request import SessionConfigRequest

__all__ = ["SessionConfigRequest"]
