"""Smart HTML link lists, site maps, breadcrumbs and navigation bars.

Links to the current page are rendered as labels rather than links, and
navigation views show only the part of the site around the current page.
"""

from .format import FormatConfig
from .links import (
    render_breadcrumb,
    render_explicit_tree,
    render_flat_list,
    render_full_tree,
    render_nav_bar,
    render_nav_tree,
)

__all__ = [
    "FormatConfig",
    "render_breadcrumb",
    "render_explicit_tree",
    "render_flat_list",
    "render_full_tree",
    "render_nav_bar",
    "render_nav_tree",
]
