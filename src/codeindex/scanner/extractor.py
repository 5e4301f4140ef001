"""
Lightweight regex extraction of code elements.

This is not a parser: it finds top-level function, class and interface
declarations plus documentation comments well enough to feed the index.
"""

import re
from typing import List, Optional, Tuple

from codeindex.schemas import ElementSpec

JS_DECLARATIONS = [
    ("function", re.compile(r"^[ \t]*(?:export\s+)?(?:default\s+)?(?:async\s+)?function\s*\*?\s*(\w+)", re.MULTILINE)),
    ("class", re.compile(r"^[ \t]*(?:export\s+)?(?:default\s+)?(?:abstract\s+)?class\s+(\w+)", re.MULTILINE)),
    ("interface", re.compile(r"^[ \t]*(?:export\s+)?interface\s+(\w+)", re.MULTILINE)),
]
DOC_COMMENT_RE = re.compile(r"/\*\*[\s\S]*?\*/")

PY_DEF_RE = re.compile(r"^([ \t]*)(?:async\s+)?(def|class)\s+(\w+)")


def line_number(content: str, offset: int) -> int:
    """1-based line number of a character offset."""
    return content.count("\n", 0, offset) + 1


def extract_block(content: str, start: int) -> str:
    """
    Text from start through the brace that closes the first '{' after it.

    Falls back to the rest of the content when no opening brace exists or
    the braces never balance.
    """
    open_index = content.find("{", start)
    if open_index == -1:
        return content[start:]

    depth = 0
    for i in range(open_index, len(content)):
        char = content[i]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return content[start:i + 1]
    return content[start:]


def _extract_javascript(content: str) -> List[Tuple[int, ElementSpec]]:
    found: List[Tuple[int, ElementSpec]] = []

    for element_type, pattern in JS_DECLARATIONS:
        for match in pattern.finditer(content):
            found.append((
                match.start(),
                ElementSpec(element_type=element_type, name=match.group(1), content=extract_block(content, match.start())),
            ))

    for match in DOC_COMMENT_RE.finditer(content):
        found.append((
            match.start(),
            ElementSpec(
                element_type="comment",
                name=f"comment@{line_number(content, match.start())}",
                content=match.group(0),
            ),
        ))

    return found


def _indent_width(text: str) -> int:
    return len(text.expandtabs(4))


def _signature_end(lines: List[str], start: int) -> int:
    """
    Index of the line that closes a definition's header.

    Brackets opened on the def line may span several lines (for example a
    signature with one parameter per line and the closing ``):`` dedented).
    """
    depth = 0
    for index in range(start, len(lines)):
        line = lines[index].split("#", 1)[0]
        depth += sum(line.count(c) for c in "([{") - sum(line.count(c) for c in ")]}")
        if depth <= 0:
            return index
    return start


def _extract_python(content: str) -> List[Tuple[int, ElementSpec]]:
    found: List[Tuple[int, ElementSpec]] = []
    lines = content.split("\n")
    offsets = []
    position = 0
    for line in lines:
        offsets.append(position)
        position += len(line) + 1

    # (indent, qualified name) of enclosing definitions
    scope: List[Tuple[int, str]] = []

    for index, line in enumerate(lines):
        match = PY_DEF_RE.match(line)
        if not match:
            continue

        indent = _indent_width(match.group(1))
        while scope and scope[-1][0] >= indent:
            scope.pop()

        name = match.group(3)
        qualified = f"{scope[-1][1]}.{name}" if scope else name
        element_type = "class" if match.group(2) == "class" else "function"

        end = _signature_end(lines, index) + 1
        while end < len(lines):
            body_line = lines[end]
            if body_line.strip() and _indent_width(body_line[: len(body_line) - len(body_line.lstrip())]) <= indent:
                break
            end += 1

        block = "\n".join(lines[index:end]).rstrip()
        found.append((offsets[index], ElementSpec(element_type=element_type, name=qualified, content=block)))
        scope.append((indent, qualified))

    return found


def extract_elements(content: str, language: Optional[str] = "javascript") -> List[ElementSpec]:
    """
    Extract indexable elements from source text.

    Args:
        content: File content
        language: "javascript" (also used for TypeScript) or "python";
            anything else yields no elements

    Returns:
        ElementSpec list in source order
    """
    if not content:
        return []

    if language == "python":
        found = _extract_python(content)
    elif language == "javascript":
        found = _extract_javascript(content)
    else:
        return []

    found.sort(key=lambda pair: pair[0])
    return [spec for _, spec in found]
