"""go-initializer: scaffold Go service source trees from a declarative config."""

__version__ = "0.1.0"
