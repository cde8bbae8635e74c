#!/usr/bin/env python3
"""Simple Pomodoro — entry point.

Run with:
    python main.py
    python -m simplepomodoro
"""

from simplepomodoro.__main__ import main


if __name__ == "__main__":
    main()
