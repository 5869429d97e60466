from __future__ import annotations

from setuptools import find_packages, setup


setup(
    name="graphalgs",
    version="0.1.0",
    description="Union-find and classic graph algorithms on numpy-backed graphs",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=["numpy>=1.22"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["graphalgs=graphalgs.cli:main"]},
)
