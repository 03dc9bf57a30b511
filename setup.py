import re
from pathlib import Path

from setuptools import find_packages, setup

version = re.search(r'^__version__ = "([^"]+)"', Path("granular_search/__init__.py").read_text(), re.MULTILINE)

setup(
    name="granular-search",
    version=version.group(1),  # type: ignore[union-attr]
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Database",
        "Typing :: Typed",
    ],
    packages=find_packages(include=["granular_search", "granular_search.*"]),
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "more-itertools>=10.1.0",
        "nwa-stdlib>=1.9.0",
        "pydantic>=2.7.1",
        "pydantic-settings>=2.2.1",
        "sqlalchemy>=2.0.0",
        "structlog>=23.1.0",
        "typer>=0.12.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "granular-search=granular_search.cli.main:app",
        ],
    },
    description="Whitelist request parameters against a table's columns and turn them into SQLAlchemy filters",
    long_description=Path("README.md").read_text(),
    long_description_content_type="text/markdown",
)
