"""Glyph table for the profile card.

Each icon is an SVG fragment drawn in its own ``width`` x ``height`` view box.
Lookups that miss, or hit an icon with no body, fall back to a plain dot.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

FALLBACK_FILL = "#666666"


@dataclass(frozen=True)
class Icon:
    body: str
    width: int = 32
    height: int = 32


def _badge(fill: str, label: str, text_fill: str = "#ffffff", size: int = 13) -> Icon:
    return Icon(
        f'<rect x="2" y="2" width="28" height="28" rx="4" fill="{fill}"/>'
        f'<text x="16" y="21" font-family="monospace" font-size="{size}" font-weight="bold" '
        f'text-anchor="middle" fill="{text_fill}">{label}</text>'
    )


LANGUAGE_ICONS: dict[str, Icon] = {
    "JavaScript": _badge("#f5de19", "JS", text_fill="#000000"),
    "TypeScript": _badge("#3178c6", "TS"),
    "Python": Icon(
        '<path fill="#3572a5" d="M15.9 2C9 2 9.4 5 9.4 5v3.1h6.7V9H6.7S2 8.5 2 15.9s4.1 7.1 4.1 7.1h2.4v-3.4'
        's-.1-4.1 4-4.1h6.8s3.9.1 3.9-3.7V5.5S23.8 2 15.9 2z"/>'
        '<path fill="#ffd43b" d="M16.1 30c6.9 0 6.5-3 6.5-3v-3.1h-6.7V23h9.4s4.7.5 4.7-6.9-4.1-7.1-4.1-7.1'
        'h-2.4v3.4s.1 4.1-4 4.1h-6.8s-3.9-.1-3.9 3.7v6.3S8.2 30 16.1 30z"/>'
    ),
    "Java": _badge("#b07219", "J"),
    "Go": _badge("#00add8", "Go"),
    "Rust": _badge("#dea584", "Rs", text_fill="#000000"),
    "C++": _badge("#f34b7d", "C++", size=10),
    "C": _badge("#555555", "C"),
    "HTML": Icon('<path fill="#e34c26" d="M5 3h22l-2 22.5L16 29l-9-3.5z"/><path fill="#ffffff" d="M11 9h10l-.3 3H14l.2 2.5h6.3l-.6 6.5L16 22.2l-3.9-1.2-.3-3h2.6l.1 1.4 1.5.4 1.5-.4.2-2.4H11.5z"/>'),
    "CSS": Icon('<path fill="#1572b6" d="M5 3h22l-2 22.5L16 29l-9-3.5z"/><path fill="#ffffff" d="M11 9h10l-.3 3h-6.6l.2 2.5h6.2l-.6 6.5L16 22.2l-3.9-1.2-.3-3h2.6l.1 1.4 1.5.4 1.5-.4.2-2.4H11.5z"/>'),
    "Vue": Icon('<path fill="#41b883" d="M19.1 4H24l-8 13.8L8 4h4.9L16 9.3z"/><path fill="#41b883" d="M2 4h6l8 13.8L24 4h6L16 28z"/><path fill="#35495e" d="M8 4h4.9L16 9.3 19.1 4H24l-8 13.8z"/>'),
    "React": Icon(
        '<circle cx="16" cy="16" r="2.6" fill="#61dafb"/>'
        '<g fill="none" stroke="#61dafb" stroke-width="1.4">'
        '<ellipse cx="16" cy="16" rx="13" ry="5"/>'
        '<ellipse cx="16" cy="16" rx="13" ry="5" transform="rotate(60 16 16)"/>'
        '<ellipse cx="16" cy="16" rx="13" ry="5" transform="rotate(120 16 16)"/></g>'
    ),
    "PHP": Icon('<ellipse cx="16" cy="16" rx="14" ry="8" fill="#777bb3"/><text x="16" y="20" font-family="monospace" font-size="10" font-weight="bold" text-anchor="middle" fill="#ffffff">php</text>'),
    "Ruby": Icon('<path fill="#cc342d" d="M8 4h16l6 8-14 16L2 12z"/><path fill="#ffffff" fill-opacity=".35" d="M8 4l8 8 8-8M2 12h28"/>'),
    "Swift": _badge("#f05138", "Sw"),
    "Kotlin": Icon('<path fill="#a97bff" d="M3 3h26L16 16l13 13H3z"/>'),
}

FOLDER_ICON = Icon(
    '<path fill="#dcb67a" d="M27.4 5.5h-9.2l-2.1 4.2H4.3v16.8h25.2v-21zm0 18.7H6.4V11.8h20.9z"/>'
    '<path fill="#dcb67a" d="M25.7 14.2H9.3l-5 12.3h21.4l5-12.3z"/>'
)

GIT_ICON = Icon(
    '<path fill="#dd4c35" d="M29.5 14.6L17.4 2.5a1.8 1.8 0 0 0-2.5 0l-2.5 2.5 3.2 3.2a2.1 2.1 0 0 1 2.7 2.7'
    'l3.1 3.1a2.1 2.1 0 1 1-1.3 1.2l-2.9-2.9v7.6a2.1 2.1 0 1 1-1.7-.1V12.1a2.1 2.1 0 0 1-1.1-2.8L11.2 6.2'
    '2.5 14.9a1.8 1.8 0 0 0 0 2.5l12.1 12.1a1.8 1.8 0 0 0 2.5 0l12.4-12.4a1.8 1.8 0 0 0 0-2.5z"/>'
)


def fallback_marker(x, y, radius=6):
    return f'<circle cx="{x + radius + 2}" cy="{y}" r="{radius}" fill="{FALLBACK_FILL}"/>'


def render_icon(icon: Optional[Icon], x, y, size=16, scale=0.8, lift=8, fallback_radius=6):
    """Place ``icon`` with its top-left near (x, y - lift); degrade to a dot when unusable."""
    if icon is None or not icon.body:
        return fallback_marker(x, y, fallback_radius)
    return (
        f'<g transform="translate({x}, {y - lift}) scale({scale})">'
        f'<svg width="{size}" height="{size}" viewBox="0 0 {icon.width or 24} {icon.height or 24}">'
        f'{icon.body}'
        f'</svg></g>'
    )


def language_icon(name: str, x, y):
    return render_icon(LANGUAGE_ICONS.get(name), x, y)
