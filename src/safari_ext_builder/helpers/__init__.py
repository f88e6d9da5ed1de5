"""Helper modules for the Safari Extension Builder."""
