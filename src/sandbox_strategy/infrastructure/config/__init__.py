from .config import SandboxOptions, Settings, build_request_config, get_settings

__all__ = ["SandboxOptions", "Settings", "build_request_config", "get_settings"]
