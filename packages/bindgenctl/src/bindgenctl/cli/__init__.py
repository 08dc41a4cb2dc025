"""bindgenctl CLI package."""

from __future__ import annotations

from importlib import import_module

__all__ = ["build_parser", "main"]


def build_parser():
    return import_module("bindgenctl.cli.main").build_parser()


def main(argv=None, self_path=None):
    return import_module("bindgenctl.cli.main").main(argv, self_path=self_path)
