"""
Core package for the campus cafe
Contains the orchestrator that wires storage, stores and services
"""

from .cafe import CampusCafe

__all__ = [
    'CampusCafe'
]
