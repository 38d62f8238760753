#!/usr/bin/env python3
import argparse
import os

import yaml
from jinja2 import TemplateError

from monthly_todos import __version__
from monthly_todos.calendar_days import MonthRequest
from monthly_todos.todo_generator import TodoGenerator

DEFAULT_CONFIG = "todos.yml"
PATH_KEYS = ("output_dir", "template_dir")


def load_config(path, required=False):
    if not os.path.exists(path):
        if required:
            raise FileNotFoundError(f"Config file not found: {path}")
        return {}
    with open(path, 'r') as f:
        config = yaml.safe_load(f) or {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    for key in PATH_KEYS:
        if key in config and not isinstance(config[key], str):
            raise ValueError(f"Config key {key!r} in {path} must be a string")
    return config


def month_number(value):
    month = int(value)
    if not 1 <= month <= 12:
        raise argparse.ArgumentTypeError(f"{value} is not in 1..12")
    return month


def build_parser():
    parser = argparse.ArgumentParser(
        prog="monthly-todos",
        description="This CLI creates a TODO file for a given month.",
    )
    parser.add_argument("-y", "--year", type=int, required=True, help="Year for the TODOS file.")
    parser.add_argument("-m", "--month", type=month_number, required=True, help="Month for the TODOS file (1-12).")
    parser.add_argument("-p", "--path", help="Output directory for the TODOS file.")
    parser.add_argument("-t", "--templates", help="Directory holding header.md and 1.md..7.md.")
    parser.add_argument("-c", "--config", help=f"Path to config file (default: {DEFAULT_CONFIG}).")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config or DEFAULT_CONFIG, required=args.config is not None)
        request = MonthRequest(args.year, args.month, args.path)
        generator = TodoGenerator(args.templates or config.get("template_dir"))
        generator.generate_file(request, default_dir=config.get("output_dir"))
    except (TemplateError, OSError, ValueError, yaml.YAMLError) as exc:
        raise SystemExit(f"Error creating TODOS file: {exc}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
