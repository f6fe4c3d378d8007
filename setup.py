#!/usr/bin/env python3
"""
Setup script for Auto MAC Changer
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="auto-mac-changer",
    version="1.0.0",
    author="Auto MAC Changer Contributors",
    description="Periodically randomize network interface MAC addresses on Linux",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: No Input/Output (Daemon)",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Security",
        "Topic :: System :: Networking",
    ],
    python_requires=">=3.8",
    install_requires=[
        "apscheduler>=3.10.0,<4.0",
        "colorama>=0.4.6",
        "tqdm>=4.65.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "auto-mac-changer=orchestration.service:main",
            "auto-mac-changer-install=lifecycle.install:main",
            "auto-mac-changer-uninstall=lifecycle.uninstall:main",
            "auto-mac-changer-configure=lifecycle.configure:main",
            "auto-mac-changer-status=lifecycle.status:main",
        ],
    },
)
