"""
XML message renderer.

This module renders compiler diagnostics as XML elements for IDEs and build
tools. A complete document is ``render_preamble()``, any number of
``render``/``render_usage`` fragments, then ``render_conclusion()``::

    <MESSAGES><ERROR path="a.kt" line="3" column="5">oops</ERROR>
    </MESSAGES>
"""

from typing import List, Optional

from ..core.data_structures import CompilerMessageSourceLocation
from ..core.enums import CompilerMessageSeverity
from .escaping import escape_xml

ROOT_TAG = "MESSAGES"


class XmlMessageRenderer:
    """Renderer for XML output format."""

    @property
    def name(self) -> str:
        return "XML"

    def get_name(self) -> str:
        """Return the key this renderer is registered under."""
        return self.name

    def render_preamble(self) -> str:
        return f"<{ROOT_TAG}>"

    def render(
        self,
        severity: CompilerMessageSeverity,
        message: str,
        location: Optional[CompilerMessageSourceLocation],
    ) -> str:
        """
        Render one diagnostic as an XML element followed by a newline.

        The tag is the severity's presentable name. The message body and the
        location path are escaped; line and column are written as-is.
        """
        tag_name = severity.presentable_name
        out: List[str] = ["<", tag_name]
        if location is not None:
            out.append(f' path="{escape_xml(location.path)}"')
            out.append(f' line="{location.line}"')
            out.append(f' column="{location.column}"')
        out.append(">")

        out.append(escape_xml(message))

        out.append(f"</{tag_name}>\n")
        return "".join(out)

    def render_usage(self, usage: str) -> str:
        return self.render(CompilerMessageSeverity.STRONG_WARNING, usage, None)

    def render_conclusion(self) -> str:
        return f"</{ROOT_TAG}>"

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


xml_message_renderer = XmlMessageRenderer()
