"""Outer interfaces: command line and HTTP."""
