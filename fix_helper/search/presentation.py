"""
Display Records

Builds UI-agnostic records for the host launcher: list rows for search
results, the per-tag detail view, and the actions attached to each (push a
detail view, open the reference dictionary, copy plain text).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from fix_helper.dictionary.codes import HEADER_TAGS, TRAILER_TAGS
from fix_helper.dictionary.models import TagDefinition
from fix_helper.search.reference import get_onixs_url


class ActionKind(str, Enum):
    """Kinds of actions the host executes."""

    PUSH = "push"
    OPEN_IN_BROWSER = "open_in_browser"
    COPY_TO_CLIPBOARD = "copy_to_clipboard"


class TagCategory(Enum):
    """Tag classes used for icons and tint colours."""

    HEADER = ("header", "envelope", "blue")
    TRAILER = ("trailer", "checkmark", "green")
    ENUMERATED = ("enumerated", "list", "orange")
    BODY = ("body", "tag", "secondary-text")

    def __init__(self, label: str, icon: str, color: str):
        self._label = label
        self._icon = icon
        self._color = color

    @property
    def label(self) -> str:
        return self._label

    @property
    def icon(self) -> str:
        return self._icon

    @property
    def color(self) -> str:
        return self._color


@dataclass(frozen=True)
class Shortcut:
    """Keyboard shortcut."""

    modifiers: Tuple[str, ...]
    key: str


OPEN_IN_DICTIONARY_SHORTCUT = Shortcut(modifiers=("cmd", "shift"), key="o")
OPEN_IN_DICTIONARY_TITLE = "Open in OnixS Dictionary"


@dataclass(frozen=True)
class TagAction:
    """An action offered on a row."""

    kind: ActionKind
    title: str
    content: Optional[str] = None
    url: Optional[str] = None
    shortcut: Optional[Shortcut] = None
    icon: Optional[str] = None
    target_tag: Optional[int] = None


@dataclass(frozen=True)
class TagIcon:
    source: str
    tint_color: str


@dataclass(frozen=True)
class TagListItem:
    """One search result row."""

    key: str
    title: str
    subtitle: str
    accessory_text: str
    icon: Optional[TagIcon]
    actions: Tuple[TagAction, ...]
    tag: TagDefinition

    @property
    def tag_number(self) -> int:
        return self.tag.tag_number

    @property
    def enum_count(self) -> int:
        return self.tag.enum_count


@dataclass(frozen=True)
class DetailRow:
    title: str
    subtitle: str
    actions: Tuple[TagAction, ...]
    icon: Optional[str] = None
    key: Optional[str] = None


@dataclass(frozen=True)
class DetailSection:
    title: str
    rows: Tuple[DetailRow, ...]


@dataclass(frozen=True)
class TagDetailView:
    """Detail view of a single tag."""

    navigation_title: str
    sections: Tuple[DetailSection, ...]

    def section(self, title_prefix: str) -> Optional[DetailSection]:
        for section in self.sections:
            if section.title.startswith(title_prefix):
                return section
        return None


def tag_category(tag: TagDefinition) -> TagCategory:
    """Classify a tag by its position in a message."""
    if tag.tag_number in HEADER_TAGS:
        return TagCategory.HEADER
    if tag.tag_number in TRAILER_TAGS:
        return TagCategory.TRAILER
    if tag.has_enums:
        return TagCategory.ENUMERATED
    return TagCategory.BODY


def get_tag_icon(tag: TagDefinition) -> str:
    return tag_category(tag).icon


def get_tag_color(tag: TagDefinition) -> str:
    return tag_category(tag).color


def enum_accessory_text(tag: TagDefinition) -> str:
    """Get the ``"<n> values"`` accessory, empty for tags without enums."""
    return f"{tag.enum_count} values" if tag.has_enums else ""


def _copy(title: str, content: str) -> TagAction:
    return TagAction(kind=ActionKind.COPY_TO_CLIPBOARD, title=title, content=content)


def _open_in_dictionary(tag: TagDefinition, version_id: str, base_url: Optional[str]) -> TagAction:
    return TagAction(
        kind=ActionKind.OPEN_IN_BROWSER,
        title=OPEN_IN_DICTIONARY_TITLE,
        url=get_onixs_url(version_id, tag.tag_number, base_url),
        shortcut=OPEN_IN_DICTIONARY_SHORTCUT,
    )


def build_list_item(
    tag: TagDefinition,
    version_id: str,
    show_icons: bool = True,
    base_url: Optional[str] = None,
) -> TagListItem:
    """Build the search result row for a tag."""
    actions = [
        TagAction(
            kind=ActionKind.PUSH,
            title="View Tag Details",
            icon="sidebar",
            target_tag=tag.tag_number,
        ),
        _open_in_dictionary(tag, version_id, base_url),
        _copy("Copy Tag Number", str(tag.tag_number)),
        _copy("Copy Tag Name", tag.name),
    ]
    if tag.type:
        actions.append(_copy("Copy Type", tag.type))

    icon = TagIcon(source=get_tag_icon(tag), tint_color=get_tag_color(tag)) if show_icons else None

    return TagListItem(
        key=str(tag.tag_number),
        title=tag.name,
        subtitle=str(tag.tag_number),
        accessory_text=enum_accessory_text(tag),
        icon=icon,
        actions=tuple(actions),
        tag=tag,
    )


def build_detail_view(
    tag: TagDefinition,
    version_id: str,
    base_url: Optional[str] = None,
) -> TagDetailView:
    """
    Build the detail view of a tag.

    The view has a "Tag Details" section (number, name and, when known, type)
    and, for enumerated tags, a "Valid Values (<n>)" section with one row per
    code.
    """
    open_action = _open_in_dictionary(tag, version_id, base_url)

    rows = [
        DetailRow(
            title="Tag Number",
            subtitle=str(tag.tag_number),
            actions=(open_action, _copy("Copy Tag Number", str(tag.tag_number))),
        ),
        DetailRow(
            title="Tag Name",
            subtitle=tag.name,
            actions=(open_action, _copy("Copy Tag Name", tag.name)),
        ),
    ]
    if tag.type:
        rows.append(
            DetailRow(title="Type", subtitle=tag.type, actions=(_copy("Copy Type", tag.type),))
        )

    sections = [DetailSection(title="Tag Details", rows=tuple(rows))]

    if tag.enum_values:
        enum_rows = tuple(
            DetailRow(
                title=description,
                subtitle=code,
                icon="tag",
                key=code,
                actions=(
                    _copy("Copy Value", code),
                    _copy("Copy Description", description),
                ),
            )
            for code, description in tag.enum_values.items()
        )
        sections.append(
            DetailSection(title=f"Valid Values ({len(enum_rows)})", rows=enum_rows)
        )

    return TagDetailView(
        navigation_title=f"{tag.name} (Tag {tag.tag_number}) - {version_id}",
        sections=tuple(sections),
    )
