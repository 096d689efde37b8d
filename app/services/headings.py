import re
from typing import Dict, List

from markdown_it import MarkdownIt

from app.schemas.blog import Heading

# ASCII \w so ids line up with anchors generated by the JS frontend
_NON_WORD_RUN = re.compile(r"[^\w]+", re.ASCII)

# Inline tokens whose content is literal heading text
_TEXT_TOKENS = ("text", "text_special", "code_inline")

_parser = MarkdownIt("commonmark")


def heading_id(text: str) -> str:
    """Lowercase ``text`` and collapse each run of non-word characters to ``-``."""
    return _NON_WORD_RUN.sub("-", text.lower())


def extract_headings(markdown_text: str, unique: bool = False) -> List[Heading]:
    """
    Parse a post body as CommonMark and return its headings (levels 1-6) in
    document order.

    Text keeps only the literal content of emphasis and inline code spans.
    Headings inside code blocks are not headings. Duplicate ids are returned
    as-is unless ``unique`` is set, in which case repeats get a ``-1``,
    ``-2``... suffix.
    """
    tokens = _parser.parse(markdown_text or "")

    headings: List[Heading] = []
    seen: Dict[str, int] = {}
    for index, token in enumerate(tokens):
        if token.type != "heading_open":
            continue
        text = _inline_text(tokens[index + 1].children or [])
        anchor = heading_id(text)
        if unique:
            occurrences = seen.get(anchor, 0)
            seen[anchor] = occurrences + 1
            if occurrences:
                anchor = f"{anchor}-{occurrences}"
        headings.append(Heading(id=anchor, text=text, level=int(token.tag[1:])))
    return headings


def _inline_text(children) -> str:
    parts = []
    for child in children:
        if child.type in _TEXT_TOKENS:
            parts.append(child.content)
        elif child.type == "softbreak":
            parts.append(" ")
        elif child.children:
            parts.append(_inline_text(child.children))
    return "".join(parts)
