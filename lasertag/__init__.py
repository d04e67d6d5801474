"""Threaded simulation of laser tag matches between two teams, with a command-line runner."""

__version__ = "0.1.0"