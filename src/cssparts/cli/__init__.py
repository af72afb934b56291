from cssparts.cli.main import cli

__all__ = ["cli"]
