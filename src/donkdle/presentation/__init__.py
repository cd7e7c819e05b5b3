"""Terminal presentation of feedback records."""

from .board import (
    format_moves_cell,
    format_moves_preview,
    format_requirement_cell,
    render_answer,
    render_board,
    render_search_hits,
    render_stats,
)

__all__ = [
    "format_moves_cell",
    "format_moves_preview",
    "format_requirement_cell",
    "render_answer",
    "render_board",
    "render_search_hits",
    "render_stats",
]
