from .cache import LinuxSandboxRootfsManager, ROOTFS_CACHE_DIRNAME, resolve_rootfs_cache_path

__all__ = ["LinuxSandboxRootfsManager", "ROOTFS_CACHE_DIRNAME", "resolve_rootfs_cache_path"]
