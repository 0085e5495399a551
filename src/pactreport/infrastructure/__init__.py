"""Infrastructure: JSON serialization, report file I/O, logging setup."""
