"""Reading of text records and rotating writing of per-language text and metadata files."""

__all__ = ["metawriter", "textreader", "textwriter", "writer_base"]