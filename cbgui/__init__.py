"""Flask web interface for uploading, inspecting and downloading files, with a text page for choosing an encryption mode."""

__version__ = "0.1.0"
__all__ = ["app", "components", "file_data", "views"]