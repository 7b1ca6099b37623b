"""Console front end for the Intcode machine."""

from .app import AppConfig, IntcodeApp, RunReport

__all__ = [
    "AppConfig",
    "IntcodeApp",
    "RunReport",
]
