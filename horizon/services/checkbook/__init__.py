"""
Generated Checkbook payments API client.
"""

from .client import CheckbookClient, FetchResponse, fill_template
from .operations import OPERATIONS, Operation

__all__ = ["CheckbookClient", "FetchResponse", "fill_template", "OPERATIONS", "Operation"]
