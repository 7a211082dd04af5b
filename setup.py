"""
Setup script for marvel_client package.
"""

from setuptools import setup, find_packages

setup(
    name="marvel-api-client",
    version="1.0.0",
    description="Client asynchrone typé pour l'API publique Marvel Comics (signature, rate limiting)",
    author="Marvel Client Team",
    packages=find_packages(),
    install_requires=[
        "aiohttp>=3.9.0",
        "python-dotenv>=1.0.0",
        "python-dateutil>=2.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
        ],
    },
    python_requires=">=3.10",
)
