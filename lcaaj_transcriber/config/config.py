#!/usr/bin/env python
# coding=utf-8

"""Default settings for the command line interface and the web API."""

from pathlib import Path


__all__ = [
    "OUTPUT_DIR",
    "LOG_FILE",
    "INPUT_COLUMN",
    "OUTPUT_COLUMN",
    "HOST",
    "PORT",
]
"""Variables that are available to be imported
by other modules.
"""


DATA_DIR = Path("data")

OUTPUT_DIR = DATA_DIR / "output"
"""Path to the output folder for transcribed files and logs"""

LOG_FILE = "log.txt"
"""Name of the log file in the output folder"""

INPUT_COLUMN = "notation"
"""Column with LCAAJ notation in csv input files"""

OUTPUT_COLUMN = "ipa"
"""Column the transcriptions are written to"""

HOST = "127.0.0.1"
"""Interface the web API listens on"""

PORT = 8080
"""Port the web API listens on"""
