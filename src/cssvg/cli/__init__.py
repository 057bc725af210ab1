from cssvg.cli.main import cli

__all__ = ["cli"]
