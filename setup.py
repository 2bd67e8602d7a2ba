from setuptools import setup, find_packages

setup(
    name="hostcrawl",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110.0",
        "pydantic>=2.0.0",
        "uvicorn>=0.27.0",
        "aiohttp>=3.9.0",
        "beautifulsoup4>=4.12.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.23.0",
            "httpx>=0.27.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "hostcrawl=hostcrawl.main:run",
        ],
    },
)
