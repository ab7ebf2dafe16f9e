"""TikZ rendering backend producing a standalone LaTeX picture."""

from __future__ import annotations

import math
import unicodedata
from dataclasses import dataclass, field
from typing import List

from ..geodesic import EdgeDescription, GeodesicKind
from ..projector import PixelPoint

FOOTNOTE_EM_PT = 8.0
LABEL_WIDTH_EM = 0.52
LABEL_HEIGHT_EM = 0.9

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{tikz}
\tikzset{
  htv/line width/.store in=\htvLW,      htv/line width=0.4pt,
  htvdisk/.style={line width=\htvLW, draw=black!30},
  htvedge/.style={line width=\htvLW, draw=black, draw opacity=0.5},
  htvlabel/.style={font=\footnotesize, inner sep=1pt, fill=white},
}
\begin{document}
%s
\end{document}
"""


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted


def latex_escape(text: str) -> str:
    text = unicodedata.normalize("NFC", text)
    text = "".join(ch for ch in text if unicodedata.category(ch) != "Mn")
    repl = {
        "\\": r"\textbackslash{}",
        "&": r"\&",
        "%": r"\%",
        "$": r"\$",
        "#": r"\#",
        "_": r"\_",
        "{": r"\{",
        "}": r"\}",
        "~": r"\textasciitilde{}",
        "^": r"\textasciicircum{}",
    }
    return "".join(repl.get(ch, ch) for ch in text)


@dataclass
class TikzLabel:
    """Node label sized from footnote font metrics."""

    text: str
    font_pt: float = FOOTNOTE_EM_PT
    visible: bool = True
    position: PixelPoint = PixelPoint(0.0, 0.0)

    @property
    def width(self) -> float:
        return max(len(self.text), 1) * LABEL_WIDTH_EM * self.font_pt

    @property
    def footprint_height(self) -> float:
        return LABEL_HEIGHT_EM * self.font_pt

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def set_position(self, point: PixelPoint) -> None:
        self.position = PixelPoint(float(point[0]), float(point[1]))

    def contains(self, point: PixelPoint) -> bool:
        if not self.visible:
            return False
        return (
            abs(point[0] - self.position.x) <= self.width / 2.0
            and abs(point[1] - self.position.y) <= self.footprint_height / 2.0
        )


@dataclass
class TikzCanvas:
    """Edge sink and label registry for a ``width`` x ``height`` pixel viewport.

    One pixel maps to one TikZ point. Pixel rows grow downwards, so the
    y axis is flipped on output.
    """

    width: float
    height: float
    edges: List[EdgeDescription] = field(default_factory=list)
    labels: List[TikzLabel] = field(default_factory=list)
    draw_disk: bool = True

    def clear(self) -> None:
        self.edges.clear()

    def add(self, edge: EdgeDescription) -> None:
        self.edges.append(edge)

    def label(self, text: str, *, font_pt: float = FOOTNOTE_EM_PT) -> TikzLabel:
        handle = TikzLabel(text, font_pt=font_pt)
        self.labels.append(handle)
        return handle

    def _coord(self, point: PixelPoint) -> str:
        return f"({_format_float(point[0])}, {_format_float(self.height - point[1])})"

    def _edge_command(self, edge: EdgeDescription) -> str:
        if edge.kind is GeodesicKind.CURVE and edge.control is not None:
            control = self._coord(edge.control)
            return "  \\draw[htvedge] {a} .. controls {c} and {c} .. {b};".format(
                a=self._coord(edge.start), c=control, b=self._coord(edge.end)
            )
        return "  \\draw[htvedge] {a} -- {b};".format(a=self._coord(edge.start), b=self._coord(edge.end))

    def _disk_command(self) -> str:
        center = self._coord(PixelPoint(self.width / 2.0, self.height / 2.0))
        return "  \\draw[htvdisk] {c} ellipse [x radius={rx}, y radius={ry}];".format(
            c=center,
            rx=_format_float(self.width / 2.0),
            ry=_format_float(self.height / 2.0),
        )

    def visible_labels(self) -> List[TikzLabel]:
        return [label for label in self.labels if label.visible]

    def to_tikz(self) -> str:
        lines = ["\\begin{tikzpicture}[x=1pt, y=1pt]"]
        if self.draw_disk:
            lines.append(self._disk_command())
        lines.extend(self._edge_command(edge) for edge in self.edges)
        for label in self.visible_labels():
            lines.append(
                "  \\node[htvlabel] at {p} {{{text}}};".format(
                    p=self._coord(label.position), text=latex_escape(label.text)
                )
            )
        lines.append("\\end{tikzpicture}")
        return "\n".join(lines)

    def to_document(self) -> str:
        return standalone_tpl % self.to_tikz()


__all__ = ["TikzCanvas", "TikzLabel", "latex_escape"]
