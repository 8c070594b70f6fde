"""Setup script for multidigest."""

import re
from pathlib import Path

from setuptools import find_packages, setup


def read_version():
    """Read __version__ from the package without importing it."""
    init = Path(__file__).parent / "multidigest" / "__init__.py"
    match = re.search(r'^__version__ = "([^"]+)"', init.read_text(), re.MULTILINE)
    if not match:
        raise RuntimeError("Unable to find __version__ in multidigest/__init__.py")
    return match.group(1)


setup(
    name="multidigest",
    version=read_version(),
    description="Self-describing hash values (multihash) with an extensible algorithm registry",
    python_requires=">=3.10",
    packages=find_packages(include=["multidigest", "multidigest.*"]),
    install_requires=[
        "base58>=2.1",
        "dependency-injector>=4.41",
        "pycryptodome>=3.19",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "tomli>=2.0; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Security :: Cryptography",
    ],
)
