"""ipfetch: fetch an IP-info endpoint and print JSON or HTML body text."""

__version__ = "0.1.0"
