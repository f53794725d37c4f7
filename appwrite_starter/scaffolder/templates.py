"""Jinja2 placeholder rendering for project scaffolding.

Provides the TemplateRenderer class which substitutes ``{{ placeholder }}``
tokens in file contents and file paths with values from a flat context
mapping. Tokens are evaluated one at a time with Jinja2 so that filters such
as ``{{ projectName | slugify }}`` work, while everything outside the tokens is
copied untouched. Values are inserted verbatim: autoescaping is disabled.

Tokens that reference a name missing from the context, that reference no name
at all, or that are not valid Jinja2 expressions are left exactly as written.
Template packs ship Vue single-file components whose own ``{{ }}`` bindings
must survive rendering.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from jinja2 import Environment, StrictUndefined, Template, TemplateError, meta


# ---------------------------------------------------------------------------
# Placeholder syntax
# ---------------------------------------------------------------------------

# {{{ name }}} is the raw form of a token. Output is never escaped, so it renders
# like {{ name }}.
_PLACEHOLDER_PATTERN = re.compile(
    r"{{{\s*(?P<raw>[^{}]+?)\s*}}}"
    r"|{{\s*(?P<expression>[^{}]+?)\s*}}"
)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders moustache placeholders against a substitution context.

    A single pass is made over the input; substituted values are never
    scanned again, so a value that itself looks like ``{{ token }}`` is
    written out literally.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        # Register custom filters
        self.env.filters["slugify"] = _slugify_filter
        self.env.filters["pascal_case"] = _pascal_case_filter
        self.env.filters["snake_case"] = _snake_case_filter
        self.env.filters["camel_case"] = _camel_case_filter
        self._compiled: dict[str, tuple[Template, frozenset[str]] | None] = {}

    # -- String rendering --------------------------------------------------

    def render_string(self, template_string: str, context: Mapping[str, str]) -> str:
        """Render every resolvable placeholder in *template_string*.

        Args:
            template_string: Text containing ``{{ name }}`` tokens.
            context: Placeholder name -> replacement value.

        Returns:
            The rendered text. Unresolvable tokens are returned unchanged, so
            ``render_string("Hello {{unknown}}", {})`` is
            ``"Hello {{unknown}}"``.
        """

        def substitute(match: re.Match[str]) -> str:
            token = match.group(0)
            expression = match.group("raw") or match.group("expression")
            template = self._compile(f"{{{{ {expression} }}}}", context)
            if template is None:
                return token
            try:
                return template.render(**context)
            except TemplateError:
                return token

        return _PLACEHOLDER_PATTERN.sub(substitute, template_string)

    def render_path(self, relative_path: str, context: Mapping[str, str]) -> str:
        """Render placeholders inside a ``/``-separated relative path."""
        return self.render_string(relative_path, context)

    # -- Internal ----------------------------------------------------------

    def _compile(self, token: str, context: Mapping[str, str]) -> Template | None:
        """Compile *token* if every name it references is in *context*."""
        if token not in self._compiled:
            self._compiled[token] = self._parse(token)

        entry = self._compiled[token]
        if entry is None:
            return None
        template, names = entry
        if not names.issubset(context.keys()):
            return None
        return template

    def _parse(self, token: str) -> tuple[Template, frozenset[str]] | None:
        try:
            names = frozenset(meta.find_undeclared_variables(self.env.parse(token)))
            if not names:
                return None
            return self.env.from_string(token), names
        except TemplateError:
            return None


# ---------------------------------------------------------------------------
# Binary / text classification
# ---------------------------------------------------------------------------


def is_text(content: bytes) -> bool:
    """Return ``True`` if *content* decodes cleanly as UTF-8.

    Only textual files are eligible for placeholder substitution; anything
    else is copied byte-for-byte.
    """
    try:
        content.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _slugify_filter(value: str) -> str:
    """Convert a string to a URL/filename-safe slug."""
    slug = re.sub(r"[^a-z0-9]+", "-", value.lower().strip())
    return slug.strip("-")


def _pascal_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", value)
    return "".join(word.capitalize() for word in parts if word)


def _snake_case_filter(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()


def _camel_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = _pascal_case_filter(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""
