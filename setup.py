"""
Setup script for kanaconv package.

kanaconv is a Python library that converts Japanese text between full-width
and half-width forms and between hiragana and katakana.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="kanaconv",
    version="0.1.0",
    author="Noyu Ritsuji",
    author_email="",
    description="Japanese character width and hiragana/katakana conversion",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/noyuri2z/kanaconv",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Linguistic",
        "Natural Language :: Japanese",
    ],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=21.0",
            "flake8>=3.9",
            "mypy>=0.900",
        ],
    },
    entry_points={
        "console_scripts": [
            "kanaconv=kanaconv.cli:main",
        ],
    },
    keywords=[
        "japanese",
        "hiragana",
        "katakana",
        "zenkaku",
        "hankaku",
        "normalization",
    ],
)
