from typing import Any, Dict, Tuple

import frontmatter
import yaml


class FrontMatterError(ValueError):
    """Raised when a document's metadata block is not valid YAML."""


def parse_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a document into its YAML front matter and body.

    A document without a ``---`` block comes back as ``({}, text)``, stripped
    of surrounding whitespace like any other body.
    Keys the caller does not know about are kept in the mapping. A block
    that is valid YAML but not a mapping yields empty metadata.
    """
    try:
        metadata, body = frontmatter.parse(text)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid front matter: {e}") from e
    return dict(metadata), body
