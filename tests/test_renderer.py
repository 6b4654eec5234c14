from datetime import datetime, timezone

from profile_stats.icons import Icon, LANGUAGE_ICONS, render_icon
from profile_stats.models import LanguageShare, ProfileStats
from profile_stats.renderer import ProfileCardRenderer, render

UPDATED = datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc)


def make_stats(languages=(), stars=1337, commits=42):
    return ProfileStats(tuple(LanguageShare(n, p) for n, p in languages), stars, commits, UPDATED)


THREE = [('TypeScript', 35), ('JavaScript', 28), ('Python', 20)]


def test_render_is_byte_identical_for_same_input():
    stats = make_stats(THREE)
    assert render(stats, 'alice') == render(stats, 'alice')


def test_render_has_fixed_canvas():
    svg = render(make_stats(), 'alice')
    assert svg.startswith('<svg width="400" height="280"')
    assert svg.rstrip().endswith('</svg>')


def test_totals_section_shifts_with_language_rows():
    empty = render(make_stats(), 'alice')
    full = render(make_stats(THREE), 'alice')

    assert 'y1="135"' in empty and 'y1="195"' in full
    assert '<text x="35" y="155" class="section-title">' in empty
    assert '<text x="35" y="215" class="section-title">' in full
    assert '<text x="35" y="175" class="value">1,337</text>' in empty
    assert '<text x="35" y="235" class="value">1,337</text>' in full
    assert 'y1="195"' not in empty


def test_update_time_and_border_shift_with_language_rows():
    empty = render(make_stats(), 'a')
    full = render(make_stats(THREE), 'a')

    assert '<text x="200" y="208" class="update-time" text-anchor="middle">Updated 10/18/2026</text>' in empty
    assert '<text x="200" y="268" class="update-time" text-anchor="middle">Updated 10/18/2026</text>' in full
    assert 'width="360" height="170" class="border-line"' in empty
    assert 'width="360" height="230" class="border-line"' in full

    renderer = ProfileCardRenderer()
    moved = renderer.section_offset(make_stats(THREE)) - renderer.section_offset(make_stats())
    assert moved == 60


def test_language_rows_and_bars():
    svg = render(make_stats(THREE), 'alice')
    assert '>TypeScript</text>' in svg
    assert 'width="42" height="8" class="bar"' in svg
    assert 'width="33.6" height="8" class="bar"' in svg
    assert '>35%</text>' in svg and '>20%</text>' in svg


def test_row_offsets():
    renderer = ProfileCardRenderer()
    stats = make_stats(THREE)
    assert renderer.section_offset(stats) == 60
    svg = renderer.render(stats, 'alice')
    for y in (123, 143, 163):
        assert f'y="{y}" class="container"' in svg


def test_unknown_language_falls_back_to_dot():
    svg = render(make_stats([('Brainfuck', 100)]), 'alice')
    assert '<circle cx="43" cy="120" r="6" fill="#666666"/>' in svg


def test_known_language_uses_glyph():
    assert 'Python' in LANGUAGE_ICONS
    svg = render(make_stats([('Python', 100)]), 'alice')
    assert '<g transform="translate(35, 112) scale(0.8)">' in svg
    assert LANGUAGE_ICONS['Python'].body in svg


def test_icon_without_body_degrades():
    assert render_icon(Icon(''), 10, 20) == '<circle cx="18" cy="20" r="6" fill="#666666"/>'
    assert render_icon(None, 0, 0, fallback_radius=8) == '<circle cx="10" cy="0" r="8" fill="#666666"/>'


def test_dynamic_text_is_escaped():
    svg = render(make_stats([('<b>"x"&', 50)]), '<script>alert(1)</script>')
    assert '<script>' not in svg
    assert '&lt;script&gt;alert(1)&lt;/script&gt;' in svg
    assert '&lt;b&gt;&quot;x&quot;&amp;' in svg
