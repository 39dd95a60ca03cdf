"""
python-markdown extension for the backslash escapes markdownify writes.

markdownify escapes ``& < ~ = |`` in text on top of the characters
python-markdown already treats as escapable. Registering them here turns
``\\<b\\>`` back into the literal ``<b>`` instead of leaving the
backslashes in the rendered text.
"""

from markdown.extensions import Extension

EXTRA_ESCAPED_CHARS = ("&", "<", "~", "=", "|")


class EscapedCharsExtension(Extension):
    def extendMarkdown(self, md):
        for char in EXTRA_ESCAPED_CHARS:
            if char not in md.ESCAPED_CHARS:
                md.ESCAPED_CHARS.append(char)


def makeExtension(**kwargs):
    return EscapedCharsExtension(**kwargs)
