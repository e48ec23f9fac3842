"""
Setup configuration for the blocksort package.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="py-blocksort",
    version="0.2.0",
    author="Alex Towell",
    author_email="lex@metafunctor.com",
    description="Burrows-Wheeler transform and move-to-front coding using suffix arrays",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "docs"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: System :: Archiving :: Compression",
        "Topic :: Text Processing",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.19.0",
        "fastapi>=0.104.0",
        "uvicorn[standard]>=0.24.0",
        "pydantic>=2.0.0",
        "prompt_toolkit>=3.0.0",
        "pydivsufsort>=0.0.10",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.10",
            "httpx>=0.24",
            "black>=21.0",
            "flake8>=3.9",
            "mypy>=0.900",
        ],
    },
    entry_points={
        "console_scripts": [
            "blocksort=blocksort.cli:main",
            "blocksort-bwt=blocksort.cli:bwt_main",
            "blocksort-mtf=blocksort.cli:mtf_main",
            "blocksort-serve=blocksort.server.api:main",
            "blocksort-repl=blocksort.repl:main",
        ],
    },
    include_package_data=True,
    keywords="burrows-wheeler bwt move-to-front mtf suffix-array compression",
)
