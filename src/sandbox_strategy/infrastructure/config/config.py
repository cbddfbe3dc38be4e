"""
Configuration for sandbox strategy selection.

Loads options from environment variables using pydantic-settings.
"""

import os
from concurrent.futures import Executor
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Mapping, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sandbox_strategy.domain.value_objects import (
    DirectoryLayout,
    ExecutionRequestConfig,
    Label,
)


class SandboxOptions(BaseSettings):
    """Sandbox options of a build request (``SANDBOX_*`` environment variables)."""

    model_config = SettingsConfigDict(
        env_prefix="SANDBOX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    rootfs: Optional[str] = Field(
        default=None,
        description="Label of a file or single-file filegroup holding the rootfs archive",
    )
    rootfs_cache_path: Optional[str] = Field(
        default=None,
        description="Directory for extracted rootfs images, defaults to <output_base>/rootfs",
    )

    @field_validator("rootfs")
    @classmethod
    def validate_rootfs(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return str(Label.parse(v))

    @property
    def rootfs_label(self) -> Optional[Label]:
        return Label.parse(self.rootfs) if self.rootfs else None


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    product_name: str = Field(default="sandbox-strategy")
    log_level: str = Field(default="WARNING")
    log_format: str = Field(default="text")  # json, text

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = {"json", "text"}
        if v not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Settings singleton, loaded once."""
    return Settings()


def build_request_config(
    options: SandboxOptions,
    workspace: Path,
    output_base: Path,
    test_arguments: Iterable[str] = (),
    verbose_failures: bool = False,
    product_name: Optional[str] = None,
    client_env: Optional[Mapping[str, str]] = None,
    background_workers: Optional[Executor] = None,
) -> ExecutionRequestConfig:
    """
    Assemble the immutable request config for one build invocation.

    Args:
        options: Sandbox options
        workspace: Workspace root
        output_base: Output base directory
        test_arguments: Test arguments of the request
        verbose_failures: Whether failures are reported verbosely
        product_name: Product name, defaults to the configured one
        client_env: Client environment, defaults to ``os.environ``
        background_workers: Worker pool forwarded to the strategies

    Returns:
        ExecutionRequestConfig
    """
    return ExecutionRequestConfig.from_test_arguments(
        test_arguments,
        directories=DirectoryLayout(workspace=workspace, output_base=output_base),
        product_name=product_name or get_settings().product_name,
        rootfs=options.rootfs_label,
        rootfs_cache_path=options.rootfs_cache_path,
        verbose_failures=verbose_failures,
        client_env=dict(os.environ) if client_env is None else client_env,
        background_workers=background_workers,
    )
