from .detector import FixedPlatform, HostPlatformDetector

__all__ = ["FixedPlatform", "HostPlatformDetector"]
