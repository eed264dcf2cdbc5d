"""Calendar event parser: free text and images in, structured calendar events out."""

__version__ = "0.1.0"
