"""
Services package for EPG Grid Service

This package contains the layout engine and the host-side coordination around it.
"""
from app.services.grid_assembler import assemble
from app.services.genre_colors import resolve_genre_color, resolve_genre_category
from app.services.layout_types import EMPTY_DATA, GridModel, LayoutConfig

__all__ = [
    'assemble',
    'resolve_genre_color',
    'resolve_genre_category',
    'EMPTY_DATA',
    'GridModel',
    'LayoutConfig',
]
