"""
Setup configuration for readcomics
"""

from setuptools import setup, find_packages

setup(
    name="readcomics",
    version="1.0.0",
    description="Scraping client and HTTP API for the readcomicsonline.ru comic aggregator",
    author="ReadComics Team",
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "tests.*", "docs"]),
    py_modules=["main"],
    install_requires=[
        "pydantic>=2.0",
        "pydantic-settings>=2.0",
        "requests>=2.28",
        "beautifulsoup4>=4.12",
        "validators>=0.20",
        "fastapi>=0.100,<0.137",
        "slowapi>=0.1.8",
    ],
    extras_require={
        "server": ["uvicorn>=0.23"],
        "test": ["pytest>=7.0", "httpx>=0.24"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
