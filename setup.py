# setup.py
from setuptools import setup, find_packages

setup(
    name="akamai_watch",
    version="0.1.0",
    description="Отслеживание изменений скрипта Akamai 2.0 на сайтах",
    packages=find_packages(exclude=["tests", "tests.*"]),  # автоматически найдёт папку akamai_watch
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "click>=8.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    python_requires=">=3.11",
)
