"""
python-markdown extension for GFM-style ``~~strikethrough~~``.

    md = Markdown(extensions=[StrikethroughExtension()])
    md.convert("~~gone~~")  # '<p><del>gone</del></p>'
"""

from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor

# Not across whitespace-only content, so "a ~~ b ~~ c" stays literal
STRIKETHROUGH_RE = r"(~{2})(?!\s)(.+?)(?<!\s)~{2}"


class StrikethroughExtension(Extension):
    def extendMarkdown(self, md):
        # Above em/strong (60) so emphasis inside the deletion still renders
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_RE, "del"), "strikethrough", 65
        )


def makeExtension(**kwargs):
    return StrikethroughExtension(**kwargs)
