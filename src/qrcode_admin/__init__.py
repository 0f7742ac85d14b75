"""QR Code Admin: client-side state engine for the QR code listing and editor."""

__version__ = "0.1.0"
