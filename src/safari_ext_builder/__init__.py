"""Safari Extension Builder - convert a web-extension bundle into an Xcode project."""

__version__ = "1.0.0"
