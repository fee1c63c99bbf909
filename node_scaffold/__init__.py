"""node-scaffold: generate OOP Express boilerplate with optional DI."""

__version__ = "1.0.0"
