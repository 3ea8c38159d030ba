#!/usr/bin/env python3
"""
Setup configuration for the GS1 Data Matrix pharmaceutical reader
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="pharma-datamatrix",
    version="1.0.0",
    author="GS1 Parser Team",
    author_email="",
    description="Decode GS1 Data Matrix photos into GTIN, NDC, expiry and lot records",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "docs", "cli"]),
    python_requires=">=3.8",
    install_requires=[
        "Pillow>=9.1",
        "numpy>=1.21",
        "zxing-cpp>=2.2",
        "python-dateutil>=2.8",
        "requests>=2.28",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "dm-decode=pharma_datamatrix.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Healthcare Industry",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Multimedia :: Graphics :: Capture",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    keywords="gs1 datamatrix barcode pharmaceutical gtin ndc openfda",
)
