"""barcodectl — structured product barcode builder and validator."""

__version__ = "0.1.0"
