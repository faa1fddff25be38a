"""Parsers for cable diagram definitions."""

from cable_router.parser.mermaid import parse_cable_mermaid
from cable_router.parser.records import cables_to_records, load_records

__all__ = ["cables_to_records", "load_records", "parse_cable_mermaid"]
