"""ai-cli -- scaffolding and build helpers for @buildlayer AI chat projects."""

__version__ = "0.1.2"
