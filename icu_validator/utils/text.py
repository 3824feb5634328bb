"""Text transformation utilities.

Pure functions for component tag conversions.
"""

import re

from icu_validator.const import TRANS_TAG_PREFIX

# Matches <0> <1> </0> </1> etc
_NUMERIC_TAG_RE = re.compile(r"<(/?)(\d+)>")
# Matches <Trans0> <Trans1> </Trans0> </Trans1> etc
_TRANS_TAG_RE = re.compile(rf"<(/?){TRANS_TAG_PREFIX}(\d+)>")


# Component interpolation libraries (e.g. i18next's Trans) emit numeric tags,
# which the ICU parser rejects as tag names.
def sanitize_input_text(text: str, ignore_trans_tag: bool) -> str:
    """Rename numeric component tags before parsing.

    Args:
        text: Message as written by the translator
        ignore_trans_tag: Whether the rename is enabled

    Returns:
        Text with <N>/</N> rewritten to <TransN>/</TransN>, or the text
        unchanged when disabled.
    """
    if not ignore_trans_tag:
        return text
    return _NUMERIC_TAG_RE.sub(rf"<\1{TRANS_TAG_PREFIX}\2>", text)


def sanitize_output_text(text: str, ignore_trans_tag: bool) -> str:
    """Undo sanitize_input_text so reports show the text as written."""
    if not ignore_trans_tag:
        return text
    return _TRANS_TAG_RE.sub(r"<\1\2>", text)


def map_offset_to_input(text: str, offset: int, ignore_trans_tag: bool) -> int:
    """Translate an offset in the sanitized text back into text.

    An offset that falls inside a renamed tag maps to the start of that tag.

    Args:
        text: Message as written by the translator
        offset: Position reported by the parser on sanitize_input_text(text)
        ignore_trans_tag: Whether the rename was applied

    Returns:
        The matching position in text
    """
    if not ignore_trans_tag:
        return offset

    shift = 0
    for match in _NUMERIC_TAG_RE.finditer(text):
        sanitized_start = match.start() + shift
        sanitized_end = match.end() + shift + len(TRANS_TAG_PREFIX)
        if offset < sanitized_start:
            break
        if offset < sanitized_end:
            return match.start()
        shift += len(TRANS_TAG_PREFIX)
    return offset - shift
