"""Module entrypoint for `python -m uerr`."""

try:
    from .cli import run
except ImportError:
    # Running this file by path (runpy.run_path) gives it no parent package.
    from uerr.cli import run


if __name__ == "__main__":
    raise SystemExit(run())
