"""
Developer aura generation module.

The aura is a piece of generative SVG art built from a dashboard: top
languages pick the colors, stars set the glow, commit volume sets the number
of blobs and the activity persona sets how fast they drift.
"""

import hashlib
import logging
import random
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Union

from .dashboard import Dashboard
from .models import Persona

logger = logging.getLogger("profile-visualizer.aura")

SVG_NS = "http://www.w3.org/2000/svg"
DEFAULT_COLORS = ["#8b5cf6", "#06b6d4", "#f43f5e", "#10b981"]
BACKGROUND = "#05050a"
CANVAS_SIZE = 400

PERSONA_DURATIONS = {
    Persona.NIGHT_OWL: 20,
    Persona.EARLY_BIRD: 5,
}
DEFAULT_DURATION = 10


class AuraGenerator:
    """
    Compose an animated SVG aura for one developer.

    Args:
        dashboard: Summaries of the developer's activity
        seed: Random seed for blob geometry. Defaults to a value derived from
              the login, so the same profile always yields the same aura.
    """

    def __init__(self, dashboard: Dashboard, seed: Optional[int] = None) -> None:
        self.dashboard = dashboard
        self.seed = seed if seed is not None else self.seed_for(dashboard.profile.login)

    @staticmethod
    def seed_for(login: str) -> int:
        return int(hashlib.sha256(login.encode("utf-8")).hexdigest()[:8], 16)

    @property
    def colors(self) -> List[str]:
        """One color per top language (at most 3), padded to three."""
        colors = [DEFAULT_COLORS[i % len(DEFAULT_COLORS)] for i, _ in enumerate(self.dashboard.languages[:3])]
        while len(colors) < 3:
            colors.append(DEFAULT_COLORS[len(colors)])
        return colors

    @property
    def blur(self) -> float:
        return min(80.0, max(20.0, 20 + self.dashboard.impact.total_stars / 100))

    @property
    def blob_count(self) -> int:
        return min(8, max(3, self.dashboard.rhythm.total_commits // 20))

    @property
    def duration(self) -> int:
        return PERSONA_DURATIONS.get(self.dashboard.rhythm.persona, DEFAULT_DURATION)

    def generate_svg(self) -> str:
        """Return the aura as a standalone SVG document."""
        rng = random.Random(self.seed)
        colors = self.colors

        svg = ET.Element("svg", {
            "xmlns": SVG_NS,
            "width": str(CANVAS_SIZE),
            "height": str(CANVAS_SIZE),
            "viewBox": f"0 0 {CANVAS_SIZE} {CANVAS_SIZE}",
            "preserveAspectRatio": "xMidYMid slice",
        })
        ET.SubElement(svg, "title").text = f"{self.dashboard.profile.login} developer aura"
        defs = ET.SubElement(svg, "defs")
        blur_filter = ET.SubElement(defs, "filter", {
            "id": "aura-blur", "x": "-50%", "y": "-50%", "width": "200%", "height": "200%",
        })
        ET.SubElement(blur_filter, "feGaussianBlur", {"in": "SourceGraphic", "stdDeviation": _fmt(self.blur)})
        ET.SubElement(svg, "rect", {"width": "100%", "height": "100%", "fill": BACKGROUND})

        group = ET.SubElement(svg, "g", {"filter": "url(#aura-blur)"})
        for i in range(self.blob_count):
            self._add_blob(group, rng, colors[i % len(colors)])

        return ET.tostring(svg, encoding="unicode")

    def _add_blob(self, parent: ET.Element, rng: random.Random, color: str) -> None:
        x = 30 + rng.random() * 40
        y = 30 + rng.random() * 40
        r = 15 + rng.random() * 25
        opacity = 0.6 + rng.random() * 0.3
        dx = x + (rng.random() * 20 - 10)
        dy = y + (rng.random() * 20 - 10)
        scale = 1.1 + rng.random() * 0.3
        dur = f"{_fmt(self.duration + rng.random() * 5)}s"

        circle = ET.SubElement(parent, "circle", {
            "cx": f"{_fmt(x)}%", "cy": f"{_fmt(y)}%", "r": f"{_fmt(r)}%",
            "fill": color, "opacity": _fmt(opacity),
        })
        for attr, start, mid in (("cx", x, dx), ("cy", y, dy), ("r", r, r * scale)):
            ET.SubElement(circle, "animate", {
                "attributeName": attr,
                "values": f"{_fmt(start)}%;{_fmt(mid)}%;{_fmt(start)}%",
                "dur": dur,
                "repeatCount": "indefinite",
                "calcMode": "spline",
                "keySplines": "0.42 0 0.58 1;0.42 0 0.58 1",
            })

    def save(self, directory: Union[str, Path]) -> Path:
        """Write ``<login>_aura.svg`` into ``directory`` and return its path."""
        path = Path(directory) / f"{self.dashboard.profile.login}_aura.svg"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.generate_svg(), encoding="utf-8")
        logger.info("Wrote aura to %s", path)
        return path


def _fmt(value: float) -> str:
    return f"{value:.2f}"
