"""
URL Parts - inspect the components of a URL from the shell.

Components:
- Parser: Turns a URL string into a ParsedUrl (backed by urllib.parse)
- Extractor: Resolves which components are present for display
- Renderer: Aligned plain text or single-line JSON
"""

__version__ = "0.1.0"
