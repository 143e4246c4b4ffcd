from .normalize import coerce_samples

__all__ = ["coerce_samples"]
