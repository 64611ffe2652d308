#!/usr/bin/env python
# coding=utf-8

"""Run the lcaaj command line interface."""

from .cli import main


main(prog_name="lcaaj")
