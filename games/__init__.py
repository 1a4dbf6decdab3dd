"""Games hosted by the Valentine app."""
