"""Chat user registry: a quadratic-probing hash table of logins and SHA-1 style password digests."""

__version__ = "0.1.0"