# parsers/base.py

from abc import ABC, abstractmethod

from .models import DocBlock


class DocBlockParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> DocBlock:
        """
        Parse a documentation string into a structured docblock.

        Requirements:
        - Deterministic output for same input
        - Offsets are byte offsets into the UTF-8 encoded text
        - Fail fast: raise the first ParseError, never return partial results
        """
        raise NotImplementedError
