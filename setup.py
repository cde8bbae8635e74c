"""Packaging for Simple Pomodoro.

Install for development:
    pip install -e ".[test]"

Build a macOS .app bundle:
    pip install py2app
    python setup.py py2app
"""

import sys

from setuptools import setup, find_packages

APP = ["main.py"]
DATA_FILES = []
OPTIONS = {
    "argv_emulation": False,
    "iconfile": None,
    "plist": {
        "CFBundleName": "Simple Pomodoro",
        "CFBundleDisplayName": "Simple Pomodoro",
        "CFBundleIdentifier": "com.simplepomodoro.app",
        "CFBundleVersion": "0.1.0",
        "CFBundleShortVersionString": "0.1.0",
        "NSHighResolutionCapable": True,
        "LSMinimumSystemVersion": "13.0",
    },
}

# py2app only exists on macOS; keep it out of ordinary installs.
bundle_kwargs = {}
if "py2app" in sys.argv:
    bundle_kwargs = {
        "app": APP,
        "data_files": DATA_FILES,
        "options": {"py2app": OPTIONS},
        "setup_requires": ["py2app"],
    }

setup(
    name="SimplePomodoro",
    version="0.1.0",
    description="Single-screen Pomodoro countdown with Focus/Break cycling",
    packages=find_packages(include=["simplepomodoro", "simplepomodoro.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyQt6>=6.5",
        "numpy>=1.24",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "gui_scripts": [
            "simple-pomodoro=simplepomodoro.__main__:main",
        ],
    },
    **bundle_kwargs,
)
