"""Fuzzy-named Bluetooth device control on top of blueutil."""

__version__ = "0.1.0"
