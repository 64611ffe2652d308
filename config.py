"""Configure the lcaaj command line interface.

The variables override the defaults in lcaaj_transcriber/config/config.py
when the CLI is run from this directory.
"""

OUTPUT_DIR = "data/output"
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
