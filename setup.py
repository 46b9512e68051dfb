"""
location: setup.py


"""
from setuptools import setup, find_packages

setup(
    name="nba-query",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "mcp>=1.6.0,<2",
        "duckdb>=1.0.0",
        "pandas>=2.2.3",
        "pydantic>=2.11.3",
        "python-dotenv>=1.1.0",
        "rich>=10.14.0,<14",
        "tabulate>=0.9.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "mypy>=1.0.0",
            "black>=23.0.0",
            "isort>=5.0.0",
            "invoke>=2.2.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "nba-query = nba_query.nba_server:main",
        ],
    },
)
