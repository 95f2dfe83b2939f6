from __future__ import annotations

class TaskMapTypeError(TypeError):
    """parallel()/series() got something that is neither a sequence nor a mapping."""

    received: type

    def __init__(self, received: type) -> None:
        self.received = received
        super().__init__(
            f"Expected a sequence or mapping of thunks, got {received.__name__}"
        )

__all__ = ("TaskMapTypeError",)
