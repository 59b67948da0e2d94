from slidegraph.cli.app import app

__all__ = ["app"]
