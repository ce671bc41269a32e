"""Building blocks of the record list."""
