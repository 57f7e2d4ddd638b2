"""Text measurement against the loaded font faces."""

from __future__ import annotations

from PIL import Image, ImageDraw

from .models import FontRole, LayoutConstants
from .palette import DEFAULT_LAYOUT
from .resources import RenderResources


class TextMetrics:
    """Measures strings for one set of resources and layout constants.

    Line heights are taken once per role from ``constants.reference_glyph``;
    individual labels are only measured for width.
    """

    def __init__(self, resources: RenderResources, constants: LayoutConstants = DEFAULT_LAYOUT) -> None:
        self.resources = resources
        self.constants = constants
        self._draw = ImageDraw.Draw(Image.new("RGBA", (1, 1)))
        self._reference: dict[FontRole, tuple[int, int, int, int]] = {
            role: self.bbox(constants.reference_glyph, role) for role in FontRole
        }

    def bbox(self, text: str, role: FontRole) -> tuple[int, int, int, int]:
        box = self._draw.multiline_textbbox(
            (0, 0),
            text,
            font=self.resources.font(role),
            spacing=self.constants.line_spacing,
        )
        return tuple(int(round(v)) for v in box)  # type: ignore[return-value]

    def measure(self, text: str, role: FontRole) -> tuple[int, int]:
        left, top, right, bottom = self.bbox(text, role)
        return right - left, bottom - top

    def line_height(self, role: FontRole) -> int:
        _left, top, _right, bottom = self._reference[role]
        return bottom - top

    def reference_top(self, role: FontRole) -> int:
        return self._reference[role][1]

    def block_height(self, lines: int, role: FontRole) -> int:
        lines = max(lines, 1)
        return lines * self.line_height(role) + (lines - 1) * self.constants.line_spacing

    def fit(self, text: str, role: FontRole, max_width: int, ellipsis: str = "...") -> str:
        """Shorten each line of ``text`` with ``ellipsis`` until its badge is at most ``max_width`` wide.

        Text that already fits is returned unchanged. A line with no room for
        any character collapses to the ellipsis alone.
        """
        room = max_width - 2 * self.constants.badge_padding_x
        if self.measure(text, role)[0] <= room:
            return text

        lines = []
        for line in text.split("\n"):
            cut = len(line)
            while cut > 0 and self.measure(line[:cut], role)[0] > room:
                cut -= 1
            if cut < len(line):
                while cut > 0 and self.measure(line[:cut].rstrip() + ellipsis, role)[0] > room:
                    cut -= 1
                line = line[:cut].rstrip() + ellipsis
            lines.append(line)
        return "\n".join(lines)

    def badge_size(self, text: str, role: FontRole) -> tuple[int, int]:
        c = self.constants
        width, _height = self.measure(text, role)
        lines = text.count("\n") + 1
        return width + 2 * c.badge_padding_x, self.block_height(lines, role) + 2 * c.badge_padding_y
