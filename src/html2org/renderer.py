#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2org/renderer.py
"""Rendering of a BeautifulSoup tree into Org-mode markup.

This module contains the traversal engine of html2org. A :class:`RenderContext`
walks the document depth-first, dispatching on element names and appending
Org markup to its output buffer while it tracks the state needed to lay text
out correctly:

- whether the cursor is at a line start, after a space or after a newline,
  and how long the current line is
- the line prefix installed by list items (continuation lines are indented)
- the depth of nested ``<blockquote>`` elements
- verbatim mode inside ``<pre>`` and ``<textarea>``
- the enclosing ``<form>`` and a counter shared by every sub-render of a
  document, so generated form identifiers never repeat
- the table being collected when pretty tables are enabled

Several elements (headings, list items, emphasis, links, inline code) are
rendered in an isolated sub-context first; only their finished text is
folded back into the parent buffer.

Supported Elements
------------------
- Headings ``h1``-``h6`` as ``*`` outline headings
- Paragraphs, ``div`` and other block containers, line breaks, ``hr``
- Ordered, unordered and definition lists
- ``b``/``strong``, ``i``/``em``, ``u``/``ins``, ``s``/``del``/``strike``
- Links, images (with ``#+CAPTION:``), inline code and ``#+begin_src`` blocks
- Block quotes as ``#+begin_quote`` blocks
- Tables as plain text or Org pipe tables
- Forms, ``input`` and ``textarea`` as ``#+begin_input``/``#+begin_textarea``
- ``title`` as ``#+TITLE:``
"""

from __future__ import annotations

import logging
from typing import Any

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import Comment, Declaration, Doctype, PageElement, ProcessingInstruction

from html2org.constants import (
    BLOCK_ELEMENTS,
    DEFAULT_FORM_METHOD,
    DIV_LIKE_ELEMENTS,
    EMPHASIS_DELIMITERS,
    FORM_ID_PREFIX,
    HEADING_LEVELS,
    HORIZONTAL_RULE,
    INLINE_CODE_ELEMENTS,
    LINK_PLACEHOLDER_TEXT,
    LIST_BULLET,
    PARAGRAPH_ELEMENTS,
    RENDERED_INPUT_TYPES,
    SKIPPED_ELEMENTS,
)
from html2org.links import normalize_link
from html2org.options import Html2OrgOptions
from html2org.parsing import parse_html
from html2org.tables import TableContext, render_table
from html2org.utils.text import break_long_lines, collapse_newlines, collapse_whitespace, flatten, normalize_output

logger = logging.getLogger(__name__)

_NON_RENDERED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)
_PLAIN_TABLE_CELLS = frozenset({"td", "th"})


class FormCounter:
    """Source of identifiers for forms and form fields.

    One counter is shared by the top-level context and every sub-context of a
    conversion, so identifiers are unique and increasing per document.
    """

    def __init__(self) -> None:
        """Start counting at zero."""
        self.value = 0

    def next_id(self) -> str:
        """Return the next identifier, e.g. ``org-form-id--1``."""
        self.value += 1
        return f"{FORM_ID_PREFIX}{self.value}"


def _attr(node: Tag, name: str) -> str:
    value = node.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def _is_text(node: Any) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, _NON_RENDERED_STRINGS)


def _has_block_descendant(node: Tag) -> bool:
    return any(isinstance(d, Tag) and d.name in BLOCK_ELEMENTS for d in node.descendants)


class RenderContext:
    """Mutable state of one rendering pass.

    Parameters
    ----------
    options : Html2OrgOptions
        Conversion options, shared read-only with sub-contexts
    anchors : frozenset[str], optional
        Fragment names referenced by in-page links
    form_counter : FormCounter, optional
        Identifier source; a new one is created when omitted

    Attributes
    ----------
    buf : list[str]
        Output chunks, in order
    prefix : str
        Text written at the start of the next non-empty line
    line_length : int
        Characters written since the last newline
    ends_with_space : bool
        Whether the last written character is whitespace
    ends_with_newline : bool
        Whether the last written character is a newline
    just_closed_block : bool
        Whether a block container just ended its line
    blockquote_level : int
        Depth of nested ``<blockquote>`` elements
    is_pre : bool
        Whether text is passed through verbatim
    form_id : str or None
        Identifier of the enclosing form, if any
    table_ctx : TableContext or None
        Table being collected in pretty-tables mode

    """

    def __init__(
        self,
        options: Html2OrgOptions,
        anchors: frozenset[str] = frozenset(),
        form_counter: FormCounter | None = None,
    ) -> None:
        """Initialize an empty context."""
        self.options = options
        self.anchors = anchors
        self.form_counter = form_counter if form_counter is not None else FormCounter()

        self.buf: list[str] = []
        self.prefix = ""
        self.line_length = 0
        self.ends_with_space = False
        self.ends_with_newline = False
        self.just_closed_block = False
        self.blockquote_level = 0
        self.is_pre = False
        self.form_id: str | None = None
        self.table_ctx: TableContext | None = None

    @property
    def in_form(self) -> bool:
        """Whether rendering is inside a ``<form>``."""
        return self.form_id is not None

    def getvalue(self) -> str:
        """Return everything written so far, without final normalization."""
        return "".join(self.buf)

    # ------------------------------------------------------------------
    # Output primitives
    # ------------------------------------------------------------------

    def emit(self, data: str) -> None:
        """Write ``data`` to the buffer, keeping the line state up to date.

        The line prefix is written before the first character of every
        non-empty line. Inside block quotes, long lines are wrapped when
        ``break_long_lines`` is enabled.
        """
        if not data:
            return

        for i, segment in enumerate(data.split("\n")):
            if i > 0:
                self.buf.append("\n")
                self.line_length = 0
            if segment:
                self._write_segment(segment)

        if not data.isspace():
            self.just_closed_block = False
        self.ends_with_newline = data.endswith("\n")
        self.ends_with_space = data[-1].isspace()

    def _write_segment(self, segment: str) -> None:
        if self.blockquote_level > 0 and self.options.break_long_lines and not self.is_pre:
            pieces = break_long_lines(segment, self.line_length)
        else:
            pieces = [segment]

        for piece in pieces:
            text = piece.rstrip("\n")
            if text:
                if self.line_length == 0 and self.prefix:
                    self.buf.append(self.prefix)
                    self.line_length += len(self.prefix)
                    self.prefix = " " * len(self.prefix)
                self.buf.append(text)
                self.line_length += len(text)
            if piece.endswith("\n"):
                self.buf.append("\n")
                self.line_length = 0

    def _ensure_line_start(self) -> None:
        if self.line_length > 0:
            self.emit("\n")

    def _subcontext(
        self, *, line_length: int = 0, ends_with_space: bool = False, is_pre: bool | None = None
    ) -> RenderContext:
        sub = RenderContext(self.options, self.anchors, self.form_counter)
        sub.form_id = self.form_id
        sub.line_length = line_length
        sub.ends_with_space = ends_with_space
        sub.is_pre = self.is_pre if is_pre is None else is_pre
        return sub

    def _render_isolated(self, node: Tag, **seed: Any) -> str:
        sub = self._subcontext(**seed)
        sub.render_children(node)
        return sub.getvalue()

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def render(self, node: PageElement) -> None:
        """Render ``node`` and its subtree into this context."""
        if isinstance(node, NavigableString):
            if _is_text(node):
                self._handle_text(str(node))
            return

        if isinstance(node, BeautifulSoup):
            self.render_children(node)
            return

        if isinstance(node, Tag):
            start = len(self.buf)
            self._handle_element(node)
            if self.options.show_internal_anchors:
                self._emit_internal_anchor(node, start)

    def render_children(self, node: Tag) -> None:
        """Render every child of ``node`` in document order."""
        for child in node.children:
            self.render(child)

    def _handle_text(self, text: str) -> None:
        if self.is_pre:
            self.emit(text)
            return
        text = collapse_whitespace(text)
        if self.line_length == 0 or self.ends_with_space:
            text = text.lstrip(" ")
        self.emit(text)

    def _handle_element(self, node: Tag) -> None:
        self.just_closed_block = False
        name = node.name

        if name in SKIPPED_ELEMENTS:
            return
        elif name == "br":
            self.emit("\n")
        elif name in HEADING_LEVELS:
            self._handle_heading(node)
        elif name == "blockquote":
            self._handle_blockquote(node)
        elif name in DIV_LIKE_ELEMENTS:
            self._handle_div(node)
        elif name == "li":
            self._handle_list_item(node)
        elif name in ("dt", "dd"):
            self._handle_definition(node)
        elif name in EMPHASIS_DELIMITERS:
            self._handle_emphasis(node, EMPHASIS_DELIMITERS[name])
        elif name == "a":
            self._handle_link(node)
        elif name == "table":
            if self.options.pretty_tables:
                self._handle_pretty_table(node)
            else:
                self._handle_paragraph(node)
        elif name in ("tr", "td", "th", "tfoot", "caption"):
            self._handle_table_part(node)
        elif name in PARAGRAPH_ELEMENTS:
            self._handle_paragraph(node)
        elif name == "img":
            self._handle_image(node)
        elif name == "pre":
            self._handle_pre(node)
        elif name in INLINE_CODE_ELEMENTS:
            self._handle_inline_code(node)
        elif name == "title":
            self._handle_title(node)
        elif name == "noscript":
            self._handle_noscript(node)
        elif name == "hr":
            self._ensure_line_start()
            self.emit(HORIZONTAL_RULE + "\n")
        elif name == "form":
            self._handle_form(node)
        elif name == "input":
            self._handle_input(node)
        elif name == "textarea":
            self._handle_textarea(node)
        else:
            self.render_children(node)

    def _emit_internal_anchor(self, node: Tag, start: int) -> None:
        element_id = _attr(node, "id")
        name = element_id if element_id in self.anchors else _attr(node, "name")
        if not name or name not in self.anchors:
            return

        marker = f"<<{name}>>"
        output = "".join(self.buf[start:])
        if not output.endswith("\n"):
            self.emit(marker)
            return

        # Keep the marker on the last content line, before the closing newlines.
        # Directive lines such as #+end_src stay intact; the marker gets its own line
        content = output.rstrip("\n")
        closing = output[len(content) :]
        if content.rsplit("\n", 1)[-1].startswith("#+"):
            self.buf[start:] = [f"{content}\n{marker}\n{closing[1:]}"]
        else:
            self.buf[start:] = [content + marker + closing]
        self.ends_with_space = False
        self.ends_with_newline = True

    # ------------------------------------------------------------------
    # Element handlers
    # ------------------------------------------------------------------

    def _handle_heading(self, node: Tag) -> None:
        content = flatten(self._render_isolated(node))
        if not content:
            return
        self.emit("\n" + "*" * HEADING_LEVELS[node.name] + " " + content + "\n")

    def _handle_blockquote(self, node: Tag) -> None:
        self.blockquote_level += 1
        try:
            self.emit("\n")
            if self.blockquote_level == 1:
                self.emit("\n#+begin_quote\n")
            self.render_children(node)
            if self.blockquote_level == 1:
                self.emit("\n#+end_quote\n")
        finally:
            self.blockquote_level -= 1
        self.emit("\n\n")

    def _handle_div(self, node: Tag) -> None:
        if self.line_length > 0:
            self.emit("\n")
        self.render_children(node)
        if not self.just_closed_block:
            self.emit("\n")
        self.just_closed_block = True

    def _handle_paragraph(self, node: Tag) -> None:
        self.emit("\n\n")
        self.render_children(node)
        self.emit("\n\n")

    def _list_marker(self, node: Tag) -> str:
        parent = node.parent
        if not isinstance(parent, Tag) or parent.name != "ol":
            return LIST_BULLET
        try:
            start = int(_attr(parent, "start").strip() or 1)
        except ValueError:
            start = 1
        position = len(node.find_previous_siblings("li"))
        return f"{start + position}. "

    def _handle_list_item(self, node: Tag) -> None:
        content = self._render_isolated(node).strip()
        if not content:
            return
        self._ensure_line_start()
        saved_prefix = self.prefix
        self.prefix = self._list_marker(node)
        try:
            self.emit(content)
        finally:
            self.prefix = saved_prefix
        self.emit("\n")

    def _handle_definition(self, node: Tag) -> None:
        self._ensure_line_start()
        if node.name == "dt":
            term = flatten(self._render_isolated(node))
            if term:
                self.emit(f"*{term}*\n")
            return
        self.render_children(node)
        self._ensure_line_start()

    def _handle_emphasis(self, node: Tag, delimiter: str) -> None:
        # Seeded mid-line so that leading whitespace survives and can be moved outside the delimiters
        raw = self._render_isolated(node, line_length=1)
        content = raw.strip()
        if not content:
            return
        if raw[0].isspace() and self.line_length > 0 and not self.ends_with_space:
            self.emit(" ")
        self.emit(f"{delimiter}{content}{delimiter}")
        if raw[-1].isspace():
            self.emit(" ")

    def _handle_link(self, node: Tag) -> None:
        children = list(node.children)
        only_child = children[0] if len(children) == 1 else None

        if only_child is not None and _is_text(only_child):
            text = collapse_whitespace(str(only_child)).strip()
        elif isinstance(only_child, Tag) and only_child.name == "img" and _attr(only_child, "alt"):
            text = _attr(only_child, "alt")
            self.render_children(node)
        elif _has_block_descendant(node):
            raw = self._render_isolated(node)
            content = flatten(raw)
            if content:
                lead = "\n" if raw.startswith("\n") and self.line_length > 0 else ""
                self.emit(lead + content + " ")
            text = LINK_PLACEHOLDER_TEXT
        else:
            text = self._render_isolated(node).strip()

        href = "" if self.options.omit_links else normalize_link(_attr(node, "href"), self.options)

        if not text and not href:
            return
        if text == href:
            self.emit(f"[[{text}]]")
        elif text and href:
            self.emit(f"[[{href}][{text}]]")
        elif href:
            self.emit(f"[[{href}]]")
        else:
            self.emit(text)

    def _handle_image(self, node: Tag) -> None:
        src = normalize_link(_attr(node, "src"), self.options)
        if not src:
            return
        alt = flatten(_attr(node, "alt"))
        if alt:
            self.emit(f"\n#+CAPTION: {alt}\n[[{src}]]\n")
        else:
            self.emit(f"[[{src}]]")

    def _handle_pre(self, node: Tag) -> None:
        if self.is_pre:
            self.render_children(node)
            return
        self.emit("\n#+begin_src\n")
        self.is_pre = True
        try:
            self.render_children(node)
        finally:
            self.is_pre = False
        self.emit("#+end_src\n" if self.ends_with_newline else "\n#+end_src\n")

    def _handle_inline_code(self, node: Tag) -> None:
        if self.is_pre:
            self.render_children(node)
            return
        content = self._render_isolated(node).strip()
        if not content:
            return
        if "\n" in content:
            self.emit(f"\n#+begin_src\n{content}\n#+end_src\n")
        else:
            self.emit(f"~{content}~")

    def _handle_title(self, node: Tag) -> None:
        title = flatten(node.get_text())
        if not title:
            return
        self._ensure_line_start()
        self.emit(f"#+TITLE: {title}\n\n\n")

    def _handle_noscript(self, node: Tag) -> None:
        if not self.options.show_noscript:
            return
        children = list(node.children)
        if len(children) == 1 and _is_text(children[0]):
            # Parsed with scripting enabled: the content is still raw markup
            logger.debug("Re-parsing raw <noscript> content")
            document = parse_html(str(children[0]), self.options.html_parser)
            sub = self._subcontext(is_pre=False)
            sub.render(document)
            self.emit(normalize_output(sub.getvalue()))
            return
        self.render_children(node)

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def _handle_pretty_table(self, node: Tag) -> None:
        self.emit("\n\n")
        saved = self.table_ctx
        table_ctx = self.table_ctx = TableContext()
        try:
            self.render_children(node)
        finally:
            self.table_ctx = saved

        if table_ctx.caption:
            self.emit(f"#+CAPTION: {table_ctx.caption}\n")
        self.emit(render_table(table_ctx, self.options.pretty_tables_options))
        self.emit("\n\n")

    def _handle_table_part(self, node: Tag) -> None:
        name = node.name
        table_ctx = self.table_ctx if self.options.pretty_tables else None

        if table_ctx is None:
            if name in _PLAIN_TABLE_CELLS and self.line_length > 0:
                self.emit(" ")
            self.render_children(node)
            if name == "tr":
                self._ensure_line_start()
            return

        if name == "tr":
            table_ctx.start_row()
            self.render_children(node)
            table_ctx.end_row()
        elif name == "tfoot":
            saved = table_ctx.in_footer
            table_ctx.in_footer = True
            try:
                self.render_children(node)
            finally:
                table_ctx.in_footer = saved
        elif name == "caption":
            table_ctx.caption = flatten(self._render_isolated(node))
        elif name == "th":
            table_ctx.add_header_cell(self._cell_text(node))
        else:
            table_ctx.add_data_cell(self._cell_text(node))

    def _cell_text(self, node: Tag) -> str:
        sub = self._subcontext()
        for child in node.children:
            sub.render(child)
            if isinstance(child, Tag) and child.name in BLOCK_ELEMENTS:
                sub.emit("\n")
        return collapse_newlines(sub.getvalue()).strip()

    # ------------------------------------------------------------------
    # Forms
    # ------------------------------------------------------------------

    def _field_header(self, node: Tag, directive: str) -> str:
        parts = [directive]
        if self.form_id is not None:
            parts += [":id", self.form_counter.next_id(), ":form", self.form_id]
            name = _attr(node, "name").strip()
            if name:
                parts += [":name", name]
        return " ".join(parts)

    def _handle_form(self, node: Tag) -> None:
        method = _attr(node, "method").strip().lower() or DEFAULT_FORM_METHOD
        action = normalize_link(_attr(node, "action") or self.options.base_url or "", self.options)
        form_id = self.form_counter.next_id()

        self._ensure_line_start()
        saved = self.form_id
        self.form_id = form_id
        try:
            self.render_children(node)
        finally:
            self.form_id = saved
        self._ensure_line_start()
        self.emit(f"[[org-form:{form_id}:{method}:{action}][Submit]]\n")

    def _handle_input(self, node: Tag) -> None:
        input_type = _attr(node, "type").strip().lower() or "unknown"
        if input_type not in RENDERED_INPUT_TYPES:
            logger.debug(f"Skipping <input type={input_type!r}>")
            return
        content = _attr(node, "value") or _attr(node, "placeholder")
        header = self._field_header(node, f"#+begin_input :type {input_type}")
        self.emit(f"\n{header}\n{content}\n#+end_input\n")

    def _handle_textarea(self, node: Tag) -> None:
        content = self._render_isolated(node, is_pre=True).rstrip("\n") or _attr(node, "placeholder")
        header = self._field_header(node, "#+begin_textarea")
        self.emit(f"\n{header}\n{content}\n#+end_textarea\n")


def render_node(node: PageElement, options: Html2OrgOptions, anchors: frozenset[str] = frozenset()) -> str:
    """Render a parsed node to normalized Org text.

    Parameters
    ----------
    node : PageElement
        Document, element or text node to render
    options : Html2OrgOptions
        Conversion options
    anchors : frozenset[str], optional
        Fragment names referenced by in-page links

    Returns
    -------
    str
        The finished Org document

    """
    ctx = RenderContext(options, anchors)
    ctx.render(node)
    return normalize_output(ctx.getvalue())
