"""Entry point for running voicefetch as a module."""

from .cli import run

if __name__ == "__main__":
    run()
