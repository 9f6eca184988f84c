from bidicss.cli.main import cli

__all__ = ["cli"]
