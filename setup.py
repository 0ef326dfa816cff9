from setuptools import setup, find_packages
from pathlib import Path

version = Path("VERSION").read_text().strip()

setup(
    name="promptarchitect",
    version=version,
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
        "requests>=2.31.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0", "httpx>=0.24.0"],
    },
    entry_points={
        "console_scripts": [
            "promptarchitect=promptarchitect.main:main",
        ],
    },
    python_requires=">=3.9",
)
