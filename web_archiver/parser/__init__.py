"""HTML document capability and text extraction."""
