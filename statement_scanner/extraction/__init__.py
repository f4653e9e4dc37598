from statement_scanner.extraction.base import BaseExtractor
from statement_scanner.extraction.extractor import Extractor
from statement_scanner.extraction.factory import ExtractorFactory
from statement_scanner.extraction.models import Transaction

__all__ = ["BaseExtractor", "Extractor", "ExtractorFactory", "Transaction"]
