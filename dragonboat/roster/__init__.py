"""
Dragonboat Roster Input

Validation of roster rows supplied by the external roster collaborator.
"""

from .schemas import RosterMember, parse_roster

__all__ = [
    "RosterMember",
    "parse_roster",
]
