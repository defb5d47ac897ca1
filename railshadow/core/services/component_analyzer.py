"""
Component analyzer — infer a React component's shape from its source text.

Pure functions, one per concern. Each runs a fixed regular expression
over the whole file; nothing here parses TypeScript. A pattern that
does not match yields an empty or default value and never raises, so
the analyzer can run over arbitrary, half-written components.

Known limitations (kept on purpose, existing outputs depend on them):
    - Props blocks end at the first ``}``, so nested object types are
      truncated.
    - When several ``*Props`` blocks exist, the last one wins.
"""

from __future__ import annotations

import logging
import re

from railshadow.core.models.description import (
    ComponentDescription,
    ExportInfo,
    Handler,
    PropField,
    StateVar,
)

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════
#  Patterns
# ══════════════════════════════════════════════════════════════════

_EXPORT_RE = re.compile(r"export\s+(default\s+)?(?:function|const|class)\s+(\w+)")
_REEXPORT_DEFAULT_RE = re.compile(r"export\s*\{\s*(\w+)\s*as\s*default")
_PROPS_RE = re.compile(r"(interface|type)\s+(\w+Props)\s*=?\s*\{([^}]+)\}")
_STATE_RE = re.compile(
    r"const\s+\[([^\]]+)\]\s*=\s*useState(?:<([^>]+)>)?\(([^)]*)\)"
)
_HANDLER_RE = re.compile(
    r"const\s+(\w*[Hh]andle\w+)\s*=\s*"
    r"(?:\([^)]*\)\s*=>\s*\{|function\s*\([^)]*\)\s*\{)"
)
_HOOK_RE = re.compile(r"use([A-Z]\w+)\(")
_ICON_IMPORT_RE = re.compile(r"import\s+\{([^}]+)\}\s+from\s+['\"]lucide-react['\"]")
_CLASSNAME_RE = re.compile(r"className=[\"']([^\"']+)[\"']")
_CHILD_TAG_RE = re.compile(r"<([A-Z]\w*)\b")

_FIELD_RE = re.compile(r"(\w+)(\?)?:\s*(.+)")
_LINE_COMMENT_RE = re.compile(r"//.*$")
_BLOCK_COMMENT_RE = re.compile(r"/\*.*\*/")
_TRAILING_SEPARATOR_RE = re.compile(r"[,;]\s*$")

BUILTIN_HOOKS = frozenset({
    "useState",
    "useEffect",
    "useRef",
    "useContext",
    "useReducer",
    "useMemo",
    "useCallback",
    "useLayoutEffect",
    "useImperativeHandle",
    "useTransition",
    "useDeferredValue",
    "useId",
})

# Checked in order; the first keyword found in the handler name wins
_HANDLER_KINDS = ("click", "change", "submit", "touch", "drag", "focus", "blur")


# ══════════════════════════════════════════════════════════════════
#  Field blocks (shared with the model analyzer)
# ══════════════════════════════════════════════════════════════════


def sanitize_lines(block: str) -> list[str]:
    """Split a block into trimmed lines with single-line comments removed."""
    lines: list[str] = []
    for line in block.split("\n"):
        line = _LINE_COMMENT_RE.sub("", line)
        line = _BLOCK_COMMENT_RE.sub("", line).strip()
        if line:
            lines.append(line)
    return lines


def parse_field_lines(block: str) -> list[PropField]:
    """Turn ``name?: type`` lines into fields, skipping anything else."""
    fields: list[PropField] = []
    for line in sanitize_lines(block):
        clean = _TRAILING_SEPARATOR_RE.sub("", line)
        match = _FIELD_RE.search(clean)
        if not match:
            continue
        fields.append(PropField(
            name=match.group(1),
            optional=bool(match.group(2)),
            type=match.group(3).strip(),
        ))
    return fields


# ══════════════════════════════════════════════════════════════════
#  Extractors
# ══════════════════════════════════════════════════════════════════


def extract_component_name(content: str) -> tuple[str, ExportInfo]:
    """Return the component name and how it is exported.

    The first ``export [default] function|const|class Name`` wins;
    ``export { Name as default }`` is the fallback.
    """
    match = _EXPORT_RE.search(content)
    if match:
        kind = "default" if match.group(1) else "named"
        return match.group(2), ExportInfo(type=kind, name=match.group(2))

    match = _REEXPORT_DEFAULT_RE.search(content)
    if match:
        return match.group(1), ExportInfo(type="default", name=match.group(1))

    return "", ExportInfo()


def extract_props(content: str) -> list[PropField]:
    """Fields of the lexically last ``XxxProps`` interface or type alias."""
    matches = list(_PROPS_RE.finditer(content))
    if not matches:
        return []
    if len(matches) > 1:
        logger.debug(
            "Found %d Props declarations; using %s",
            len(matches), matches[-1].group(2),
        )

    body = matches[-1].group(3)
    return parse_field_lines(re.sub(r"\},?$", "", body).replace("{", ""))


def extract_state(content: str) -> list[StateVar]:
    """``const [value, setValue] = useState<T>(init)`` bindings."""
    state: list[StateVar] = []
    for match in _STATE_RE.finditer(content):
        state.append(StateVar(
            name=match.group(1).split(",")[0].strip(),
            type=(match.group(2) or "unknown").strip(),
            initial_value=match.group(3).strip(),
        ))
    return state


def infer_handler_kind(handler_name: str) -> str:
    """Classify a handler by keyword in its name (``custom`` if none)."""
    lower = handler_name.lower()
    for kind in _HANDLER_KINDS:
        if kind in lower:
            return kind
    return "custom"


def extract_handlers(content: str) -> list[Handler]:
    """Functions named ``*handle*``/``*Handle*`` bound with ``const``."""
    return [
        Handler(name=m.group(1), kind=infer_handler_kind(m.group(1)))
        for m in _HANDLER_RE.finditer(content)
    ]


def extract_hooks(content: str) -> list[str]:
    """Every non-built-in ``useXxx(`` call, one entry per call site."""
    hooks: list[str] = []
    for match in _HOOK_RE.finditer(content):
        name = f"use{match.group(1)}"
        if name not in BUILTIN_HOOKS:
            hooks.append(name)
    return hooks


def extract_icons(content: str) -> list[str]:
    """Names imported from ``lucide-react`` (first import statement only)."""
    match = _ICON_IMPORT_RE.search(content)
    if not match:
        return []
    return [name.strip() for name in match.group(1).split(",") if name.strip()]


def extract_style_classes(content: str) -> list[str]:
    """Unique tokens from literal ``className="..."`` attributes."""
    seen: dict[str, None] = {}
    for match in _CLASSNAME_RE.finditer(content):
        for token in match.group(1).split():
            seen.setdefault(token, None)
    return list(seen)


def extract_child_components(content: str) -> list[str]:
    """Unique capitalized JSX tag names, in first-seen order."""
    seen: dict[str, None] = {}
    for match in _CHILD_TAG_RE.finditer(content):
        seen.setdefault(match.group(1), None)
    return list(seen)


# ══════════════════════════════════════════════════════════════════
#  Public API
# ══════════════════════════════════════════════════════════════════


def analyze_component(content: str, file_path: str = "") -> ComponentDescription:
    """Run every extractor over a component's source.

    Args:
        content: Full text of the ``.tsx`` file.
        file_path: Source path recorded in the generated artifacts.

    Returns:
        ComponentDescription (empty lists/defaults for anything not found).
    """
    name, exports = extract_component_name(content)
    description = ComponentDescription(
        name=name,
        file_path=file_path,
        exports=exports,
        props=extract_props(content),
        state=extract_state(content),
        handlers=extract_handlers(content),
        hooks=extract_hooks(content),
        icons=extract_icons(content),
        style_classes=extract_style_classes(content),
        child_components=extract_child_components(content),
    )
    logger.debug(
        "Analyzed %s: %d props, %d state, %d handlers, %d hooks",
        name or "<unnamed>",
        len(description.props),
        len(description.state),
        len(description.handlers),
        len(description.hooks),
    )
    return description
