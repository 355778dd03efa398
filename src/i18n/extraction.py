"""
src/i18n/extraction.py
──────────────────────
Collect the translatable text of a Dash component tree.

A rendered page is a tree of `Component` objects whose `children` hold
strings, numbers, other components, or lists of those. Every non-blank string
child is a text fragment, except when:

  1. its owning element is a <script>, <style> or <noscript>
  2. the owner or any ancestor up to the root carries `data-no-translate`
  3. the text is whitespace only

Fragments come back in depth-first pre-order, so the same unchanged tree
always yields the same ordinals. Use `get_text_fragments()` again after the
tree changes; positions are not live.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from dash.development.base_component import Component

NO_TRANSLATE_ATTR = "data-no-translate"
_SKIPPED_TAGS = frozenset({"script", "style", "noscript"})


@dataclass(eq=False)
class TextFragment:
    """A writable text position: `owner.children` itself or one list item of it."""

    owner: Component
    index: int | None = None

    @property
    def text(self) -> str:
        children = self.owner.children
        return children if self.index is None else children[self.index]

    @text.setter
    def text(self, value: str) -> None:
        if self.index is None:
            self.owner.children = value
            return
        children = self.owner.children
        if isinstance(children, tuple):
            children = list(children)
        children[self.index] = value
        self.owner.children = children


def is_marked_no_translate(node: Component) -> bool:
    # Presence is what counts, as with an HTML boolean attribute
    return getattr(node, NO_TRANSLATE_ATTR, None) is not None


def _tag(node: Component) -> str:
    return str(getattr(node, "_type", "")).lower()


def _walk(node: Component, blocked: bool) -> Iterator[TextFragment]:
    blocked = blocked or is_marked_no_translate(node)
    children = getattr(node, "children", None)
    if children is None:
        return

    is_sequence = isinstance(children, (list, tuple))
    items = children if is_sequence else (children,)
    skip_text = blocked or _tag(node) in _SKIPPED_TAGS

    for i, child in enumerate(items):
        if isinstance(child, str):
            if skip_text or not child.strip():
                continue
            yield TextFragment(owner=node, index=i if is_sequence else None)
        elif isinstance(child, Component):
            yield from _walk(child, blocked)


def get_text_fragments(root: Component | None) -> list[TextFragment]:
    """Return the translatable fragments under `root` (empty if there is no root)."""
    if not isinstance(root, Component):
        return []
    return list(_walk(root, blocked=False))
