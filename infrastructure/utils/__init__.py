"""Small pure helpers shared by the application layer."""

from infrastructure.utils.formatting import humanize_style

__all__ = [
    "humanize_style",
]
