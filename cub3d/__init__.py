"""Scene-file reading and validation, XPM texture decoding and BMP writing for a ray-casting maze."""

__version__ = "0.1.0"