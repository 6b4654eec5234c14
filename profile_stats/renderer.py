# renderer.py

from __future__ import annotations

from .github_base import escape_xml, format_count
from .icons import FOLDER_ICON, GIT_ICON, language_icon, render_icon
from .models import LanguageShare, ProfileStats

STYLE = """
            .container {
                font-family: 'SF Mono', Monaco, 'Cascadia Code', 'Roboto Mono', Consolas, 'Courier New', monospace;
                font-size: 12px;
                fill: #e6e6e6;
                shape-rendering: crispEdges;
                text-rendering: optimizeLegibility;
            }
            .title { font-size: 16px; font-weight: bold; fill: #ffffff; text-rendering: optimizeLegibility; }
            .username { font-size: 14px; fill: #cccccc; text-rendering: optimizeLegibility; }
            .section-title { font-size: 13px; font-weight: bold; fill: #ffffff; text-rendering: optimizeLegibility; }
            .value { font-size: 14px; font-weight: bold; fill: #ffffff; text-rendering: optimizeLegibility; }
            .percentage { font-size: 11px; fill: #cccccc; text-rendering: optimizeLegibility; }
            .border-line { stroke: #444444; stroke-width: 1; fill: none; shape-rendering: crispEdges; }
            .bar { fill: #ffffff; shape-rendering: crispEdges; }
            .bar-bg { fill: #333333; shape-rendering: crispEdges; }
            .lang-icon { fill: currentColor; opacity: 0.9; shape-rendering: optimizeQuality; }
            .update-time { font-size: 10px; fill: #666666; text-rendering: optimizeLegibility; }
"""


def format_date(moment) -> str:
    return f"{moment.month}/{moment.day}/{moment.year}"


class ProfileCardRenderer:
    """Fixed 400x280 card. Everything below the language list, including the border's bottom edge
    and the update time, shifts down 20 units per language row."""

    ROW_HEIGHT = 20
    LANG_START_Y = 120
    SEPARATOR_BASE_Y = 135
    SECTION_TITLE_BASE_Y = 155
    SECTION_VALUE_BASE_Y = 175
    BORDER_BASE_HEIGHT = 170
    UPDATED_BASE_Y = 208

    def __init__(self, width: int = 400, height: int = 280, padding: int = 20):
        self.width = width
        self.height = height
        self.padding = padding
        self.bar_x = padding + 200
        self.bar_width = 120
        self.bar_height = 8

    def section_offset(self, stats: ProfileStats) -> int:
        return len(stats.top_languages) * self.ROW_HEIGHT

    def _render_language_row(self, index: int, lang: LanguageShare) -> str:
        y = self.LANG_START_Y + index * self.ROW_HEIGHT
        fill_width = (lang.percentage / 100) * self.bar_width
        return f"""
    <g class="lang-icon">{language_icon(lang.name, self.padding + 15, y)}</g>
    <text x="{self.padding + 40}" y="{y + 3}" class="container">{escape_xml(lang.name)}</text>
    <rect x="{self.bar_x}" y="{y - 3}" width="{self.bar_width}" height="{self.bar_height}" class="bar-bg" rx="4"/>
    <rect x="{self.bar_x}" y="{y - 3}" width="{fill_width:g}" height="{self.bar_height}" class="bar" rx="4"/>
    <text x="{self.bar_x + self.bar_width + 10}" y="{y + 3}" class="percentage">{lang.percentage}%</text>"""

    def _render_totals(self, stats: ProfileStats) -> str:
        offset = self.section_offset(stats)
        separator_y = self.SEPARATOR_BASE_Y + offset
        title_y = self.SECTION_TITLE_BASE_Y + offset
        value_y = self.SECTION_VALUE_BASE_Y + offset
        commits_x = self.padding + 200
        git_icon = render_icon(GIT_ICON, commits_x, title_y - 3, size=15, scale=1.2, lift=10, fallback_radius=8)
        return f"""
    <line x1="{self.padding + 10}" y1="{separator_y}" x2="{self.width - self.padding - 10}" y2="{separator_y}" class="border-line"/>
    <text x="{self.padding + 15}" y="{title_y}" class="section-title">&#11088; Total Stars</text>
    <text x="{self.padding + 15}" y="{value_y}" class="value">{format_count(stats.total_stars)}</text>
    <g class="lang-icon">{git_icon}</g>
    <text x="{self.padding + 222}" y="{title_y}" class="section-title">Recent Commits</text>
    <text x="{commits_x}" y="{value_y}" class="value">{format_count(stats.recent_commits)}</text>"""

    def render(self, stats: ProfileStats, username: str) -> str:
        w, h, p = self.width, self.height, self.padding
        offset = self.section_offset(stats)
        rows = "".join(self._render_language_row(i, lang) for i, lang in enumerate(stats.top_languages))
        folder_icon = render_icon(FOLDER_ICON, p + 15, 95, size=22)

        return f"""<svg width="{w}" height="{h}" xmlns="http://www.w3.org/2000/svg">
    <defs><style>{STYLE}        </style></defs>
    <rect width="{w}" height="{h}" fill="#1a1a1a" rx="8"/>
    <rect x="{p}" y="{p}" width="{w - p * 2}" height="{self.BORDER_BASE_HEIGHT + offset}" class="border-line" rx="6" stroke-dasharray="2,2"/>
    <text x="{w // 2}" y="45" class="title" text-anchor="middle">GitHub Profile Stats</text>
    <text x="{w // 2}" y="65" class="username" text-anchor="middle">{escape_xml(username)}</text>
    <line x1="{p + 10}" y1="80" x2="{w - p - 10}" y2="80" class="border-line"/>
    <g class="lang-icon">{folder_icon}</g>
    <text x="{p + 40}" y="100" class="section-title">Top Languages</text>{rows}{self._render_totals(stats)}
    <text x="{w // 2}" y="{self.UPDATED_BASE_Y + offset}" class="update-time" text-anchor="middle">Updated {format_date(stats.last_updated)}</text>
</svg>"""


def render(stats: ProfileStats, username: str) -> str:
    return ProfileCardRenderer().render(stats, username)
