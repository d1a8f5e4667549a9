# setup.py
from setuptools import setup, find_packages

setup(
    name="web_archiver",
    version="0.1.0",
    description="Archive the readable text of a website into one JSON file for LLM use",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "lxml>=5.0",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "web-archiver=web_archiver.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
