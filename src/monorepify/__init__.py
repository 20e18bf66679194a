"""Monorepify - turn a single-package project into a yarn workspaces monorepo."""

__version__ = "0.4.0"
