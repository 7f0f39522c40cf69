"""
Interfaces Package - Protocols for External Collaborators.

formnest performs no I/O and does not know where its input comes from.
The only thing it consumes from the outside is an InputExtractor.
"""

from formnest.interfaces.input_extractor import InputExtractor

__all__ = ["InputExtractor"]
