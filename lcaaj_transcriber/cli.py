"""Command line interface for transcribing LCAAJ notation."""

import logging
import pathlib
import pprint

import click
import pandas as pd

from .api import create_app
from .config.config import (
    OUTPUT_DIR,
    LOG_FILE,
    INPUT_COLUMN,
    OUTPUT_COLUMN,
    HOST,
    PORT,
)
from .constants import TRANSCRIPTION_PREFIX, CODES_FILENAME
from .engine import get_transcriber
from .utils import (
    ensure_path_exists,
    load_config,
    load_notations,
    set_logging_config,
    time_process,
    write_transcriptions,
)

CFG = {
    'output_dir': str(OUTPUT_DIR),
    'log_file': LOG_FILE,
    'input_column': INPUT_COLUMN,
    'output_column': OUTPUT_COLUMN,
    'host': HOST,
    'port': PORT,
}
CONFIG_FILE = load_config("./config.py")
CFG.update(CONFIG_FILE)
CONTEXT_SETTINGS = dict(
    default_map=CFG,
    help_option_names=['-h', '--help'],
)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=pathlib.Path),
    help="The directory path that files and the log are written to.",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Print logging messages to the console in addition to the log file. "
         "-v is informative, -vv is detailed (for debugging)."
)
@click.pass_context
def main(ctx, output_dir, verbose):
    """Transcribe LCAAJ field notation to IPA and expand annotation codes.

    Default values for the output directory, csv columns and the web API
    are specified in the config.py file.

    If provided, CLI arguments override the default values from the config.
    """
    output_dir = ensure_path_exists(output_dir or CFG.get("output_dir"))
    set_logging_config(verbose, logfile=(output_dir / CFG.get("log_file")))
    logging.info("START LOG")
    CFG.update(ctx.params, output_dir=output_dir)
    if verbose:
        click.secho("Configuration values:", fg="yellow")
        click.echo(pprint.pformat(CFG))
    ctx.obj = get_transcriber()


@main.command("transcribe")
@click.argument("notations", nargs=-1, required=True)
@click.pass_obj
def transcribe_notations(transcriber, notations):
    """Print the transcription of each NOTATION argument on its own line."""
    for notation in notations:
        click.echo(transcriber.transcribe(notation))


@main.command("transcribe-file")
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=pathlib.Path),
)
@click.option(
    "-c",
    "--column",
    default=CFG.get("input_column"),
    help="Column with the notation strings, if INPUT_FILE is a csv file.",
)
@click.option(
    "-t",
    "--target-column",
    default=CFG.get("output_column"),
    help="Column the transcriptions are written to.",
)
@click.pass_obj
@time_process
def transcribe_file(transcriber, input_file, column, target_column):
    """Transcribe a csv file, or a text file with one notation per line.

    The result is written as a csv file to the output directory.
    """
    click.secho(f"Transcribe notations in {input_file}", fg="cyan")
    try:
        data = load_notations(input_file, column=column)
    except KeyError as error:
        raise click.BadParameter(str(error), param_hint="--column") from error
    data[target_column] = transcriber.transcribe_all(data[column])
    outfile = CFG.get("output_dir") / f"{TRANSCRIPTION_PREFIX}_{input_file.stem}.csv"
    write_transcriptions(outfile, data)
    click.echo(f"Output is in {outfile}")


@main.command("codes")
@click.option(
    "-w",
    "--write",
    is_flag=True,
    help=f"Write the codes to {CODES_FILENAME} in the output directory.",
)
@click.pass_obj
def list_codes(transcriber, write):
    """List the annotation codes and their glosses in order of precedence."""
    codes = pd.DataFrame(
        [rule.to_dict() for rule in transcriber.annotations.rules])
    codes["gloss"] = codes["gloss"].map(transcriber.cleanup)
    if write:
        write_transcriptions(CFG.get("output_dir") / CODES_FILENAME, codes)
    for code, gloss in codes.itertuples(index=False, name=None):
        click.echo(f"{code}\t{gloss}")


@main.command("serve")
@click.option("--host", default=CFG.get("host"), help="Interface to listen on.")
@click.option("--port", default=CFG.get("port"), type=int, help="Port to listen on.")
@click.pass_obj
def serve(transcriber, host, port):
    """Serve the transcriber over HTTP."""
    click.secho(f"Serving the transcriber on http://{host}:{port}", fg="cyan")
    create_app(transcriber).run(host=host, port=port)
