# setup.py
from setuptools import setup, find_packages

setup(
    name="email_scout",
    version="0.1.0",
    description="Asynchronous website email crawler EmailScout",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"email_scout": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "click>=8.2",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["email-scout=email_scout.cli:cli"],
    },
    python_requires=">=3.11",
)
