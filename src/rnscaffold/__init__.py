"""rnscaffold - React Native project scaffolder."""

__version__ = "0.1.0"
