from abc import ABC, abstractmethod

from jobpost_extractor.document import HtmlDocument
from jobpost_extractor.models import ScrapedJob


class BaseStrategy(ABC):
    """
    Abstract base class for all extraction strategies.
    Strategies are stateless: the same document and URL always give the same record.
    """

    name: str = "base"

    @abstractmethod
    def extract(self, document: HtmlDocument, url: str) -> ScrapedJob | None:
        """
        Extract a partial job record from the document.
        Missing fields are left empty; strategies never raise for absent markup.
        """
        pass
