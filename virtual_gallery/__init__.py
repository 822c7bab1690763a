"""Virtual Art Gallery: browse, search and bookmark the AIC collection."""

__version__ = "0.1.0"
