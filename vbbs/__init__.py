"""Building blocks of a small bulletin board system: SHA-1, containers, logging, ANSI terminal handling and user accounts."""

__version__ = "0.1.0"