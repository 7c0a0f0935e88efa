"""
Tag search: sorted/filtered views, display records and the search session.
"""

from fix_helper.search.index import (
    TagSearchIndex,
    build_sorted_list,
    composite_text,
    filter_tags,
)
from fix_helper.search.presentation import (
    ActionKind,
    DetailRow,
    DetailSection,
    Shortcut,
    TagAction,
    TagCategory,
    TagDetailView,
    TagIcon,
    TagListItem,
    build_detail_view,
    build_list_item,
    get_tag_color,
    get_tag_icon,
    tag_category,
)
from fix_helper.search.reference import get_onixs_url
from fix_helper.search.session import SearchSession

__all__ = [
    "TagSearchIndex",
    "build_sorted_list",
    "composite_text",
    "filter_tags",
    "ActionKind",
    "DetailRow",
    "DetailSection",
    "Shortcut",
    "TagAction",
    "TagCategory",
    "TagDetailView",
    "TagIcon",
    "TagListItem",
    "build_detail_view",
    "build_list_item",
    "get_tag_color",
    "get_tag_icon",
    "tag_category",
    "get_onixs_url",
    "SearchSession",
]
