"""Printer exceptions."""


class PrintError(Exception):
    """Output could not be written or flushed; the print operation is aborted."""
