"""Rewrite fetched component sources for the target project.

transform_files() is a pure function of its inputs. For each file, in order:

1. Prepend the "use client" directive to .tsx files that use client-only
   APIs when the project uses React Server Components.
2. Rewrite `@/<alias>/...` import specifiers to the project's alias paths.
3. Strip TypeScript syntax and rename .ts/.tsx to .js/.jsx when the project
   does not use TypeScript.

Step 3 is a best-effort textual transform, not a TypeScript parser. It
handles the constructs registry components use (type imports, top-level
interface/type declarations, parameter and return annotations, generic
arguments at call sites, `as` assertions) and will miss or mangle unusual
syntax such as overloads, enums, decorators, object-literal return types,
class field annotations and access modifiers (`private items: string[] = []`
is left as is).
"""

import re
from collections.abc import Mapping

from dataface.core.config import ProjectConfig

# Relative path -> text content
FileSet = dict[str, str]

CLIENT_DIRECTIVE = '"use client";'

_CLIENT_INDICATORS = re.compile(
    r"\b(?:useState|useEffect|useRef|useReducer|useContext"
    r"|onClick|onChange|onSubmit"
    r"|document|window|localStorage|sessionStorage)\b"
)
_EXISTING_DIRECTIVE = re.compile(r"""^\s*["']use client["']""")

_TYPED_EXTENSIONS = {".tsx": ".jsx", ".ts": ".js"}


def is_client_component(content: str) -> bool:
    """Whether content uses hooks, DOM event props or browser globals."""
    return _CLIENT_INDICATORS.search(content) is not None


def add_client_directive(content: str) -> str:
    if _EXISTING_DIRECTIVE.match(content):
        return content
    return f"{CLIENT_DIRECTIVE}\n\n{content}"


def transform_import_paths(code: str, aliases: Mapping[str, str]) -> str:
    """Rewrite `from "@/<alias>/<rest>"` to `from "<aliases[alias]>/<rest>"`.

    All aliases are applied in a single pass so a rewritten path is never
    rewritten again by another alias.
    """
    if not aliases:
        return code

    keys = sorted(aliases, key=len, reverse=True)
    pattern = re.compile(
        r"""from(\s+)(["'])@/(%s)/([^"'\n]+)\2""" % "|".join(re.escape(key) for key in keys)
    )

    def _replace(match: re.Match[str]) -> str:
        prefix = aliases[match.group(3)].rstrip("/")
        return f'from{match.group(1)}"{prefix}/{match.group(4)}"'

    return pattern.sub(_replace, code)


def is_typed_path(path: str) -> bool:
    if path.endswith(".d.ts"):
        return False
    return any(path.endswith(ext) for ext in _TYPED_EXTENSIONS)


def untyped_path(path: str) -> str:
    """Map button.tsx -> button.jsx and utils.ts -> utils.js."""
    for typed, untyped in _TYPED_EXTENSIONS.items():
        if path.endswith(typed):
            return path[: -len(typed)] + untyped
    return path


# ============================================================================
# Scanning helpers
# ============================================================================

_PAIRS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = set(_PAIRS.values())
# Single quotes are left out: they show up unpaired in JSX text
_STRING_DELIMITERS = {'"', "`"}
_ANNOTATION_COLON = re.compile(r"[ \t]*:")
_CONTROL_KEYWORDS = {"if", "for", "while", "switch", "catch", "with", "return", "typeof"}


def _skip_string(code: str, start: int) -> int:
    """Return the index just past the string literal opening at start."""
    delimiter = code[start]
    i = start + 1
    while i < len(code):
        if code[i] == "\\":
            i += 2
            continue
        if code[i] == delimiter:
            return i + 1
        i += 1
    return len(code)


def _skip_comment(code: str, start: int) -> int | None:
    """Return the index past a comment opening at start, or None if none opens there."""
    if code.startswith("//", start):
        end = code.find("\n", start)
        return len(code) if end == -1 else end
    if code.startswith("/*", start):
        end = code.find("*/", start + 2)
        return len(code) if end == -1 else end + 2
    return None


def _find_closing(code: str, start: int) -> int | None:
    """Index of the bracket matching the opener at start, or None if unbalanced."""
    stack = [_PAIRS[code[start]]]
    i = start + 1
    while i < len(code):
        char = code[i]
        if char in _STRING_DELIMITERS:
            i = _skip_string(code, i)
            continue
        comment_end = _skip_comment(code, i)
        if comment_end is not None:
            i = comment_end
            continue
        if char in _PAIRS:
            stack.append(_PAIRS[char])
        elif char in _CLOSERS:
            if char != stack.pop():
                return None
            if not stack:
                return i
        i += 1
    return None


def _top_level_positions(text: str, targets: str) -> list[int]:
    """Positions of target characters outside brackets, generics and strings.

    A `>` only closes a generic when a `<` is open, so comparisons such as
    `a >= 1` leave the depth alone.
    """
    positions: list[int] = []
    depth = 0
    angle_depth = 0
    i = 0
    while i < len(text):
        char = text[i]
        if char in _STRING_DELIMITERS or char == "'":
            i = _skip_string(text, i)
            continue
        if char in _PAIRS:
            depth += 1
        elif char in _CLOSERS:
            depth -= 1
        elif char == "<":
            angle_depth += 1
        elif char == ">" and angle_depth > 0 and text[i - 1] != "=":
            angle_depth -= 1
        elif depth == 0 and angle_depth == 0 and char in targets:
            positions.append(i)
        i += 1
    return positions


def _split_params(params: str) -> list[str]:
    pieces: list[str] = []
    last = 0
    for comma in _top_level_positions(params, ","):
        pieces.append(params[last:comma])
        last = comma + 1
    pieces.append(params[last:])
    return pieces


def _first_assignment(text: str, start: int = 0) -> int | None:
    """First top-level `=` at or after start that is not part of =>, == or >=."""
    for pos in _top_level_positions(text, "="):
        if pos < start:
            continue
        after = text[pos + 1] if pos + 1 < len(text) else ""
        before = text[pos - 1] if pos > 0 else ""
        if after in "=>" and after != "":
            continue
        if before in "=!<>":
            continue
        return pos
    return None


def _strip_param(param: str) -> str:
    """Drop the type annotation (and optional marker) from one parameter."""
    colons = _top_level_positions(param, ":")
    if not colons:
        return param
    colon = colons[0]
    if _first_assignment(param[:colon]) is not None:
        # The colon belongs to a default value such as `a = b ? c : d`
        return param

    head = param[:colon].rstrip()
    if head.endswith("?"):
        head = head[:-1]
    assignment = _first_assignment(param, colon)
    if assignment is None:
        return head + param[len(param.rstrip()) :]
    return f"{head} {param[assignment:]}"


def _return_annotation_end(code: str, close: int) -> int | None:
    """If `: Type` follows the `)` at close and leads into `=>` or `{`, return its end.

    The returned index points at the whitespace before the arrow or brace.
    """
    match = _ANNOTATION_COLON.match(code, close + 1)
    if match is None:
        return None

    i = match.end()
    seen_type = False
    while i < len(code):
        char = code[i]
        if char in _STRING_DELIMITERS or char == "'":
            i = _skip_string(code, i)
            seen_type = True
            continue
        if code.startswith("=>", i) and seen_type:
            break
        if char == "{" and seen_type:
            break
        if char in _PAIRS or char == "<":
            end = _find_closing(code, i) if char in _PAIRS else code.find(">", i)
            if end is None or end == -1:
                return None
            i = end + 1
            seen_type = True
            continue
        if char in _CLOSERS or char in ";,?=\n":
            return None
        if not char.isspace():
            seen_type = True
        i += 1
    else:
        return None

    while i > close + 1 and code[i - 1].isspace():
        i -= 1
    return i


def _is_signature(code: str, open_paren: int, resume: int) -> bool:
    """Whether the parenthesized group is a function's parameter list."""
    after = code[resume:].lstrip()
    if after.startswith("=>"):
        return True
    if not after.startswith("{"):
        return False
    before = re.search(r"(?:\bfunction\s*\*?\s*[\w$]*|([\w$]+))\s*$", code[:open_paren])
    if before is None:
        return False
    name = before.group(1)
    return name is None or name not in _CONTROL_KEYWORDS


def strip_signature_types(code: str) -> str:
    """Remove parameter and return type annotations from function signatures."""
    out: list[str] = []
    last = 0
    i = 0
    while i < len(code):
        char = code[i]
        if char in _STRING_DELIMITERS:
            i = _skip_string(code, i)
            continue
        comment_end = _skip_comment(code, i)
        if comment_end is not None:
            i = comment_end
            continue
        if char != "(":
            i += 1
            continue

        close = _find_closing(code, i)
        if close is None:
            i += 1
            continue
        annotation_end = _return_annotation_end(code, close)
        resume = annotation_end if annotation_end is not None else close + 1
        if not _is_signature(code, i, resume):
            i += 1
            continue

        params = ",".join(_strip_param(param) for param in _split_params(code[i + 1 : close]))
        out.append(code[last : i + 1])
        out.append(params)
        out.append(")")
        last = resume
        i = resume

    out.append(code[last:])
    return "".join(out)


# ============================================================================
# Type stripping
# ============================================================================

_IMPORT_TYPE = re.compile(
    r"""^[ \t]*import\s+type\s[^;]*?from\s*["'][^"']+["'];?[ \t]*$""", re.MULTILINE
)
_EXPORT_TYPE_LIST = re.compile(r"""^[ \t]*export\s+type\s*\{[^}]*\}[^\n]*$""", re.MULTILINE)
_NAMED_IMPORT = re.compile(
    r"""import\s+(?P<default>[\w$]+\s*,\s*)?\{(?P<names>[^}]*)\}(?P<rest>\s*from\s*["'][^"']+["'];?)"""
)
_DECLARATION_START = re.compile(
    r"^(?:export\s+)?(?:declare\s+)?(?:interface|type)\s+[A-Za-z_$][\w$]*"
)
_GENERIC_ARGUMENTS = re.compile(
    r"""(?<=[\w$])<(?:[^<>()=;{}"'`]|<[^<>()=;{}"'`]*>)+>(?=\s*\()"""
)
_VARIABLE_ANNOTATION = re.compile(
    r"^(?P<decl>[ \t]*(?:export\s+)?(?:const|let|var)\s+[\w$]+)\s*:\s*[^;\n]+?(?=\s*=(?![=>]))",
    re.MULTILINE,
)
_AS_ASSERTION = re.compile(
    r"(?<=[\w$)\]])\s+as\s+(?:const\b|[A-Za-z_$][\w$.]*(?:<[^<>\n]*>)?(?:\[\])*)"
    r"(?=\s*[);,\]}]|[ \t]*$)",
    re.MULTILINE,
)
_MODULE_BRACES = re.compile(
    r"""(^[ \t]*(?:import|export)(?:\s+type)?\s*(?:[\w$]+\s*,\s*)?\{[^}]*\}[^\n]*)""", re.MULTILINE
)
_BLANK_RUNS = re.compile(r"\n(?:[ \t]*\n){2,}")


def _drop_inline_type_specifiers(code: str) -> str:
    """`import { type A, b } from "x"` -> `import { b } from "x"`."""

    def _replace(match: re.Match[str]) -> str:
        names = [name.strip() for name in match.group("names").split(",")]
        kept = [name for name in names if name and not re.match(r"type\s", name)]
        if len(kept) == len([name for name in names if name]):
            return match.group(0)
        default = (match.group("default") or "").strip().rstrip(",").strip()
        if not kept:
            return f"import {default}{match.group('rest')}" if default else ""
        prefix = f"{default}, " if default else ""
        return f"import {prefix}{{ {', '.join(kept)} }}{match.group('rest')}"

    return _NAMED_IMPORT.sub(_replace, code)


def _bracket_delta(line: str) -> int:
    delta = 0
    for i, char in enumerate(line):
        if char in "{([<":
            delta += 1
        elif char in "})]" or (char == ">" and line[i - 1 : i] != "="):
            delta -= 1
    return delta


def remove_type_declarations(code: str) -> str:
    """Remove top-level interface and type alias declarations, including multi-line ones."""
    lines = code.split("\n")
    kept: list[str] = []
    i = 0
    while i < len(lines):
        if not _DECLARATION_START.match(lines[i]):
            kept.append(lines[i])
            i += 1
            continue

        depth = 0
        while i < len(lines):
            current = lines[i].strip()
            depth += _bracket_delta(current)
            i += 1
            if depth > 0:
                continue
            following = lines[i].strip() if i < len(lines) else ""
            if current.endswith(("=", "|", "&", ",")) or following.startswith(("|", "&")):
                continue
            break
    return "\n".join(kept)


def _strip_assertions(code: str) -> str:
    # import/export lists use `as` for renaming, which must survive
    segments = _MODULE_BRACES.split(code)
    for index in range(0, len(segments), 2):
        segments[index] = _AS_ASSERTION.sub("", segments[index])
    return "".join(segments)


def collapse_blank_lines(code: str) -> str:
    return _BLANK_RUNS.sub("\n\n", code)


def strip_types(code: str) -> str:
    """Best-effort conversion of TypeScript source text to JavaScript."""
    js = _IMPORT_TYPE.sub("", code)
    js = _drop_inline_type_specifiers(js)
    js = _EXPORT_TYPE_LIST.sub("", js)
    js = remove_type_declarations(js)
    js = _GENERIC_ARGUMENTS.sub("", js)
    js = strip_signature_types(js)
    js = _VARIABLE_ANNOTATION.sub(r"\g<decl>", js)
    js = _strip_assertions(js)
    js = collapse_blank_lines(js)
    return js.lstrip("\n")


# ============================================================================
# Pipeline
# ============================================================================


def transform_file(path: str, content: str, config: ProjectConfig) -> tuple[str, str]:
    """Apply the pipeline to one file and return its (path, content) for output."""
    if config.rsc and path.endswith(".tsx") and is_client_component(content):
        content = add_client_directive(content)

    content = transform_import_paths(content, config.aliases.as_mapping())

    if not config.tsx and is_typed_path(path):
        return untyped_path(path), strip_types(content)
    return path, content


def transform_files(files: Mapping[str, str], config: ProjectConfig) -> FileSet:
    """Return a new file set rewritten for config; files is not modified."""
    transformed: FileSet = {}
    for path, content in files.items():
        new_path, new_content = transform_file(path, content, config)
        transformed[new_path] = new_content
    return transformed
