import logging

import click

from ..config import get_log_level
from ..utils.logger import setup_logger
from .batch import batch
from .check import check

@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Show matching decisions on the console.')
@click.option('--logs-dir', default='logs', show_default=True, help='Directory for log files.')
def cli(verbose, logs_dir):
    """Command line interface for answer_checker."""
    setup_logger(level=logging.DEBUG if verbose else get_log_level(), logs_dir=logs_dir)

cli.add_command(check)
cli.add_command(batch)
