"""
Setup script for sandbox-strategy
"""

from setuptools import setup, find_packages
import pathlib

# Read the README file
HERE = pathlib.Path(__file__).parent
README = (HERE / "README.md").read_text(encoding="utf-8")

# Basic setup configuration
setup(
    name="sandbox-strategy",
    version="0.1.0",
    description="Sandboxed execution strategy selection and rootfs resolution for builds",
    long_description=README,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    include_package_data=True,
    python_requires=">=3.10.12,!=3.11.0,!=3.11.1,!=3.11.2,!=3.11.3",
    install_requires=[
        "pydantic>=2.11.5",
        "pydantic-settings>=2.12.0",
        "pyyaml>=6.0.1",
        "structlog>=24.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sandbox-strategies=sandbox_strategy.interfaces.cli.main:entry_point",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
        "Operating System :: MacOS",
        "License :: OSI Approved :: MIT License",
    ],
    keywords="sandbox build rootfs bubblewrap seatbelt",
)
