"""
EPS Reader

Reads back the pieces of a generated barcode EPS that downstream tools
care about: the %SETTINGS comment block, the bounding box, the scale
factor, the font size and the drawing primitives.

Only the output of eps_formatter is supported; this is not a PostScript
interpreter.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..core.geometry import Bar, FONT_SIZE_MM, MM_TO_PT, TextPlacement


NUMBER = r'(-?[\d.]+)'

HIRES_BBOX_REGEX = re.compile(
    rf'%%HiResBoundingBox:\s*{NUMBER}\s+{NUMBER}\s+{NUMBER}\s+{NUMBER}'
)
BBOX_REGEX = re.compile(r'%%BoundingBox:\s*(-?\d+)\s+(-?\d+)\s+(-?\d+)\s+(-?\d+)')
SCALE_REGEX = re.compile(rf'^{NUMBER}\s+{NUMBER}\s+sc$', re.MULTILINE)
FONT_REGEX = re.compile(rf'findfont\s+{NUMBER}\s+scalefont')

# n x1 y1 m x1 y2 l x2 y2 l x2 y1 l f c
BAR_REGEX = re.compile(
    rf'^n\s+{NUMBER}\s+{NUMBER}\s+m\s+{NUMBER}\s+{NUMBER}\s+l\s+'
    rf'{NUMBER}\s+{NUMBER}\s+l\s+{NUMBER}\s+{NUMBER}\s+l\s+f\s+c$',
    re.MULTILINE,
)
# n x y m (text) s c
TEXT_REGEX = re.compile(
    rf'^n\s+{NUMBER}\s+{NUMBER}\s+m\s+\(([^)]+)\)\s+s\s+c$',
    re.MULTILINE,
)

SETTINGS_HEADER = "%SETTINGS"
SETTING_LINE_REGEX = re.compile(r'^%\s+([^:]+):\s*(.*)$')


@dataclass
class EpsDocument:
    """Drawing content recovered from an EPS barcode document."""
    bounding_box: Optional[Tuple[int, int]] = None
    hires_bounding_box: Optional[Tuple[float, float]] = None
    scale: float = MM_TO_PT
    font_size: float = FONT_SIZE_MM
    bars: List[Bar] = field(default_factory=list)
    texts: List[TextPlacement] = field(default_factory=list)
    settings: Dict[str, str] = field(default_factory=dict)


def read_settings(eps_content: str) -> Dict[str, str]:
    """
    Parse the %SETTINGS comment block into a dict.

    Example:
        >>> read_settings(eps)["Value"]
        '9780306406157'
    """
    settings: Dict[str, str] = {}
    in_block = False
    for line in eps_content.splitlines():
        if line.strip() == SETTINGS_HEADER:
            in_block = True
            continue
        if not in_block:
            continue
        match = SETTING_LINE_REGEX.match(line)
        if not match:
            break
        settings[match.group(1).strip()] = match.group(2).strip()
    return settings


def read_document(eps_content: str) -> EpsDocument:
    """Extract bounding boxes, scale, font size, bars, texts and settings."""
    doc = EpsDocument(settings=read_settings(eps_content))

    match = BBOX_REGEX.search(eps_content)
    if match:
        doc.bounding_box = (int(match.group(3)), int(match.group(4)))

    match = HIRES_BBOX_REGEX.search(eps_content)
    if match:
        doc.hires_bounding_box = (float(match.group(3)), float(match.group(4)))

    match = SCALE_REGEX.search(eps_content)
    if match:
        doc.scale = float(match.group(1))

    match = FONT_REGEX.search(eps_content)
    if match:
        doc.font_size = float(match.group(1))

    for m in BAR_REGEX.finditer(eps_content):
        x1, y1, _, y2, x2 = (float(m.group(i)) for i in range(1, 6))
        doc.bars.append(Bar(x=x1, width=x2 - x1, bottom=y1, top=y2))

    for m in TEXT_REGEX.finditer(eps_content):
        doc.texts.append(TextPlacement(
            x=float(m.group(1)),
            y=float(m.group(2)),
            text=m.group(3),
        ))

    return doc
