"""Command line argument handling package."""

from segpath.ui.cli.args.parser import ArgumentParser
from segpath.ui.cli.args.options import CLIArgs, InspectArgs, ListArgs, RenderArgs, WhereArgs

__all__ = ["ArgumentParser", "CLIArgs", "InspectArgs", "ListArgs", "RenderArgs", "WhereArgs"]
