"""Caption encoder TCP bridge."""

__all__: list[str] = []
