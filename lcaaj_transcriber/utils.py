"""Utility functions for lcaaj_transcriber"""

import functools
import importlib.util
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, Union

import click
import pandas as pd


def ensure_path_exists(path):
    """Make sure a directory exists and is a Path object."""
    path_obj = Path(path)
    path_obj.mkdir(exist_ok=True, parents=True)
    return path_obj


def resolve_rel_path(file_rel_path: Union[str, Path]) -> Path:
    """Resolve the full path from a potential relative path to the local or parent directory."""

    full_path = Path(file_rel_path).resolve()
    if not full_path.exists():
        full_path = Path.cwd().parent / file_rel_path
    return full_path


def load_module_from_path(file_path):
    """Use importlib to load a module from a .py file path."""
    module_path = resolve_rel_path(file_path)
    assert module_path.suffix == ".py", (
            f"Inappropriate file type: {module_path.suffix} ({file_path})")
    module_name = module_path.stem

    spec = importlib.util.spec_from_file_location(module_name, module_path)
    module = importlib.util.module_from_spec(spec)
    sys.modules[spec.name] = module
    spec.loader.exec_module(module)
    return module


def load_module_dict(module_path) -> Dict:
    """Load a dict of the public variables defined in a python module, ``{var_name:value}``."""
    module = load_module_from_path(module_path)
    module_dict = module.__dict__
    return {
        key: value for key, value in module_dict.items()
        if value and not key.startswith("_")
    }


def load_config(filename):
    """Load variable names (lower case) and their values as a dict from a .py file."""
    try:
        return {k.lower(): v for k, v in load_module_dict(filename).items()}
    except FileNotFoundError:
        return {}


def load_notations(file_path: Union[str, Path],
                   column: str = "notation") -> pd.DataFrame:
    """Load LCAAJ notation strings into a pandas DataFrame.

    A .csv file must have a header row with the given column.
    Any other file is read as plain text with one notation per line.

    Parameters
    ----------
    file_path: str or pathlib.Path
    column: str
        Name of the column with the notation strings

    Returns
    -------
    pd.DataFrame
    """
    file_path = Path(file_path)
    if file_path.suffix == ".csv":
        data = pd.read_csv(file_path, header=0, index_col=None,
                           dtype=str, keep_default_na=False)
        if column not in data.columns:
            raise KeyError(f"Column {column!r} not found in {file_path}")
        return data
    with open(file_path, encoding="utf-8") as notation_file:
        lines = notation_file.read().splitlines()
    return pd.DataFrame({column: lines})


def write_transcriptions(output_file: Union[str, Path], data: pd.DataFrame):
    """Write the transcribed notation data to a csv file."""
    logging.info("Write transcriptions to %s", output_file)
    data.to_csv(output_file, header=True, index=False)


def time_process(f):
    """Take the time of the process and print it to the console."""
    def new_func(*args, **kwargs):

        start = datetime.now()
        result = f(*args, **kwargs)
        end = datetime.now()
        click.secho(f"Processing time: {str(end - start)}", fg="blue")
        return result

    functools.update_wrapper(new_func, f)
    return new_func


def log_level(verbosity: int):
    """Calculate the log level given by the number of -v flags.

    0 = logging.WARNING (30)
    1 = logging.INFO (20)
    2 = logging.DEBUG (10)
    """
    return (3 - verbosity) * 10 if verbosity in (0, 1, 2) else 10


def set_logging_config(verbose=0, logfile="log.txt"):
    """Configure logging level and destination based on user input."""
    logging.basicConfig(
        level=logging.DEBUG,
        format=(
            "%(asctime)s | %(levelname)s "
            "| %(module)s-%(funcName)s-%(lineno)04d | %(message)s"),
        datefmt='%Y-%m-%d %H:%M',
        filename=logfile,
        filemode='a')

    if verbose:
        # define a Handler which writes log messages to stderr
        console = logging.StreamHandler()
        console.setLevel(log_level(verbose))
        formatter = logging.Formatter(
            '%(asctime)-10s | %(levelname)s | %(message)s')
        console.setFormatter(formatter)
        logging.getLogger('').addHandler(console)

    return verbose
