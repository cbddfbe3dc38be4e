from .static_resolver import StaticTargetResolver

__all__ = ["StaticTargetResolver"]
