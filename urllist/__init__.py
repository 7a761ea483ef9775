"""URL List - named link collections with custom slugs and publishing."""

__version__ = "0.1.0"
