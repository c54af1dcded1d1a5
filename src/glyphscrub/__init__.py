"""glyphscrub — strip invisible and confusable Unicode from text trees."""

__version__ = "0.1.0"
