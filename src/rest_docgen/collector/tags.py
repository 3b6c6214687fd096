"""Documentation tag lookups."""

import re

from rest_docgen.parser.base import ParamTag, Tag

PATHVAR_TAG = "pathVar"
QUERYPARAM_TAG = "queryParam"
REQUESTBODY_TAG = "requestBody"


def find_tag_text(tags: list[Tag], name: str) -> str | None:
    """Find the text of the first ``<name> <text>`` tag, or None."""
    for tag in tags:
        parts = re.split(r"\s+", tag.text.strip(), maxsplit=1)
        if len(parts) == 2 and parts[0] == name:
            return parts[1]
    return None


def find_param_text(param_tags: list[ParamTag], name: str) -> str | None:
    """Find the comment of the ``@param`` tag for ``name``, or None."""
    for tag in param_tags:
        if tag.name == name:
            return tag.comment
    return None


def find_param_comment(param_tags: list[ParamTag], name: str) -> str:
    text = find_param_text(param_tags, name)
    return text if text is not None else ""
