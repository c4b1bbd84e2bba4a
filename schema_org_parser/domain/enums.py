"""Domain enums for the schema.org parser."""
from enum import Enum


class OutputFormatEnum(Enum):
    """Output formats for rendered terms."""
    TEXT = "text"
    SQL = "sql"
    JSON = "json"
