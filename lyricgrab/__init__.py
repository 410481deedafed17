from .version import __version__
from .extract.engine import ExtractionResult, extract, extract_html

__all__ = ["__version__", "ExtractionResult", "extract", "extract_html"]
