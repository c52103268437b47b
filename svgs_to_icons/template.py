"""HTML demo page for browsing generated icons."""

from __future__ import annotations

import html
from pathlib import Path
from typing import List, Sequence, Tuple

from .paths import DEMO_NAME, EMBEDDED_DIR_NAME
from .records import IconRecord

# (key, css value, label). Black and transparent are hard-wired in the selects.
_COLORS: Tuple[Tuple[str, str, str], ...] = (
    ("white", "#FFFFFF", "White"),
    ("blue", "#2196F3", "Blue"),
    ("blue-lighten-10", "#42A5F5", "Blue Lighten 10"),
    ("blue-lighten-20", "#64B5F6", "Blue Lighten 20"),
    ("blue-lighten-30", "#90CAF9", "Blue Lighten 30"),
    ("blue-darken-10", "#1E88E5", "Blue Darken 10"),
    ("blue-darken-20", "#1976D2", "Blue Darken 20"),
    ("blue-darken-30", "#1565C0", "Blue Darken 30"),
    ("green", "#4CAF50", "Green"),
    ("green-lighten-10", "#66BB6A", "Green Lighten 10"),
    ("green-lighten-20", "#81C784", "Green Lighten 20"),
    ("green-lighten-30", "#A5D6A7", "Green Lighten 30"),
    ("green-darken-10", "#43A047", "Green Darken 10"),
    ("green-darken-20", "#388E3C", "Green Darken 20"),
    ("green-darken-30", "#2E7D32", "Green Darken 30"),
    ("red", "#F44336", "Red"),
    ("red-lighten-10", "#EF5350", "Red Lighten 10"),
    ("red-lighten-20", "#E57373", "Red Lighten 20"),
    ("red-lighten-30", "#FFCDD2", "Red Lighten 30"),
    ("red-darken-10", "#E53935", "Red Darken 10"),
    ("red-darken-20", "#D32F2F", "Red Darken 20"),
    ("red-darken-30", "#C62828", "Red Darken 30"),
    ("yellow", "#FFEB3B", "Yellow"),
    ("yellow-lighten-10", "#FFF176", "Yellow Lighten 10"),
    ("yellow-lighten-20", "#FFF59D", "Yellow Lighten 20"),
    ("yellow-lighten-30", "#FFF9C4", "Yellow Lighten 30"),
    ("yellow-darken-10", "#FDD835", "Yellow Darken 10"),
    ("orange", "#FF9800", "Orange"),
    ("orange-lighten-10", "#FFB74D", "Orange Lighten 10"),
    ("orange-lighten-20", "#FFCC80", "Orange Lighten 20"),
    ("orange-lighten-30", "#FFE0B2", "Orange Lighten 30"),
    ("orange-darken-10", "#FB8C00", "Orange Darken 10"),
    ("orange-darken-20", "#F57C00", "Orange Darken 20"),
    ("orange-darken-30", "#EF6C00", "Orange Darken 30"),
    ("purple", "#9C27B0", "Purple"),
    ("purple-lighten-10", "#AB47BC", "Purple Lighten 10"),
    ("purple-lighten-20", "#BA68C8", "Purple Lighten 20"),
    ("purple-lighten-30", "#CE93D8", "Purple Lighten 30"),
    ("purple-darken-10", "#8E24AA", "Purple Darken 10"),
    ("purple-darken-20", "#7B1FA2", "Purple Darken 20"),
    ("purple-darken-30", "#6A1B9A", "Purple Darken 30"),
    ("teal", "#009688", "Teal"),
    ("teal-lighten-10", "#26A69A", "Teal Lighten 10"),
    ("teal-lighten-20", "#4DB6AC", "Teal Lighten 20"),
    ("teal-lighten-30", "#80CBC4", "Teal Lighten 30"),
    ("teal-darken-10", "#00897B", "Teal Darken 10"),
    ("teal-darken-20", "#00796B", "Teal Darken 20"),
    ("teal-darken-30", "#00695C", "Teal Darken 30"),
    ("gray", "#9E9E9E", "Gray"),
    ("gray-lighten-40", "#FAFAFA", "Gray Lighten 40"),
    ("gray-lighten-30", "#F5F5F5", "Gray Lighten 30"),
    ("gray-lighten-20", "#EEEEEE", "Gray Lighten 20"),
    ("gray-lighten-10", "#E0E0E0", "Gray Lighten 10"),
    ("gray-darken-10", "#757575", "Gray Darken 10"),
    ("gray-darken-20", "#616161", "Gray Darken 20"),
    ("gray-darken-30", "#424242", "Gray Darken 30"),
    ("gray-darken-40", "#212121", "Gray Darken 40"),
)

ICON_SIZES = (16, 24, 32, 48, 64, 96)
DEFAULT_ICON_SIZE = 48

_PAGE_STYLES = """
		:root {
			--icon-size: 48px;
			--icon-color: #000000;
			--background-color: transparent;
			--background-radius: 8px;
			--standard-outline: #d1d1d1;
			--primary: #444;
		}
		* { margin: 0; padding: 0; box-sizing: border-box; }
		body {
			font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif;
			background: hsl(0, 0%, 99%);
			color: #444;
			line-height: 1.6;
			padding: 24px;
			min-height: 100vh;
		}
		a { color: inherit; text-underline-offset: 5px; }
		.container { max-width: 1200px; margin: 0 auto; }
		h1 { font-size: 2.5rem; text-align: center; margin-bottom: 8px; color: var(--primary); }
		.subtitle, .subtitle-file-protocol {
			text-align: center;
			opacity: 0.7;
			max-width: 725px;
			margin: 0 auto 54px auto;
		}
		.subtitle-file-protocol { display: none; }
		body.file-protocol .subtitle { display: none; }
		body.file-protocol .subtitle-file-protocol { display: block; }
		#control-panel {
			border-radius: 16px;
			padding: 24px;
			margin-bottom: 32px;
			display: grid;
			grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
			gap: 20px;
			border: 1px solid var(--standard-outline);
			background: white;
		}
		body.file-protocol #control-panel, body.file-protocol #icon-grid { display: none; }
		.control-group { display: flex; flex-direction: column; gap: 8px; }
		.search-group { grid-column: 1 / -1; }
		label { font-weight: 500; font-size: 0.875rem; }
		select, input {
			padding: 12px;
			border: 1px solid var(--standard-outline);
			border-radius: 8px;
			font: inherit;
			font-size: 0.875rem;
		}
		#icon-grid {
			display: grid;
			grid-template-columns: repeat(auto-fill, minmax(200px, 1fr));
			gap: 16px;
		}
		.demo-tile {
			border-radius: 12px;
			padding: 20px;
			text-align: center;
			border: 1px solid var(--standard-outline);
		}
		.demo-swatch {
			display: flex;
			justify-content: center;
			align-items: center;
			margin: 0 auto 16px auto;
			padding: calc(var(--icon-size) / 3);
			width: min-content;
			aspect-ratio: 1;
			background: var(--background-color);
			border-radius: var(--background-radius);
		}
		.demo-info { display: flex; flex-direction: column; gap: 4px; }
		.demo-name { font-weight: 500; font-size: 0.875rem; }
		.demo-class {
			font-family: 'Monaco', 'Menlo', 'Ubuntu Mono', monospace;
			font-size: 0.75rem;
			background: rgba(103, 80, 164, 0.1);
			padding: 4px 8px;
			border-radius: 4px;
			word-break: break-all;
			color: #666;
			border: none;
			cursor: copy;
		}
		@media (max-width: 768px) {
			body { padding: 16px; }
			h1 { font-size: 2rem; }
			#control-panel { grid-template-columns: 1fr; }
			#icon-grid { grid-template-columns: repeat(auto-fill, minmax(150px, 1fr)); }
		}
"""

_SCRIPT = """
	(function() {
		var root = document.documentElement;
		var radii = { circle: '50%', square: '0', rounded: '8px' };
		function bind(id, handler) {
			document.getElementById(id).addEventListener('change', function (e) { handler(e.target.value); });
		}
		bind('icon-size-select', function (value) { root.style.setProperty('--icon-size', value + 'px'); });
		bind('icon-color-select', function (value) { root.style.setProperty('--icon-color', value); });
		bind('background-color-select', function (value) { root.style.setProperty('--background-color', value); });
		bind('background-shape-select', function (value) {
			root.style.setProperty('--background-radius', radii[value] || '8px');
		});
		var items = document.querySelectorAll('.demo-tile');
		document.getElementById('search-input').addEventListener('input', function (e) {
			var term = e.target.value.toLowerCase();
			items.forEach(function (item) {
				var matches = item.dataset.name.indexOf(term) !== -1 || item.dataset.class.indexOf(term) !== -1;
				item.style.display = matches ? 'block' : 'none';
			});
		});
		document.getElementById('icon-grid').addEventListener('click', function (e) {
			var button = e.target.closest('.demo-class');
			if (!button) { return; }
			e.preventDefault();
			if (navigator.clipboard) {
				navigator.clipboard.writeText(button.dataset.copy).catch(function (err) {
					console.error('Failed to copy:', err);
				});
			}
		});
		if (window.location.protocol === 'file:' && !document.body.dataset.embedded) {
			document.body.classList.add('file-protocol');
		}
	})();
"""


def _color_options() -> str:
    return "".join(
        f'<option value="{value}" data-name="{key}">{html.escape(label)}</option>'
        for key, value, label in _COLORS
    )


def _size_options() -> str:
    chunks: List[str] = []
    for size in ICON_SIZES:
        selected = " selected" if size == DEFAULT_ICON_SIZE else ""
        chunks.append(f'<option value="{size}"{selected}>{size}px</option>')
    return "".join(chunks)


def _render_icon_item(record: IconRecord) -> str:
    class_name = html.escape(record.class_name)
    snippet = html.escape(f'<span class="{record.class_name}"></span>')
    return (
        f'<div class="demo-tile" data-name="{html.escape(record.display_name.lower())}" '
        f'data-class="{class_name}">'
        f'<div class="demo-swatch"><div class="{class_name}"></div></div>'
        '<div class="demo-info">'
        f'<p class="demo-name">{html.escape(record.display_name)}</p>'
        f'<button class="demo-class" data-copy="{snippet}" title="Copy {snippet}">{class_name}</button>'
        "</div>"
        "</div>"
    )


def _demo_icon_styles(icon_selector: str) -> str:
    return (
        f"{icon_selector} {{\n"
        "\t\t\tmask-size: 100% 100%;\n"
        "\t\t\tmask-repeat: no-repeat;\n"
        "\t\t\tmask-position: center;\n"
        "\t\t\tdisplay: inline-block;\n"
        "\t\t\twidth: var(--icon-size);\n"
        "\t\t\theight: var(--icon-size);\n"
        "\t\t\tbackground-color: var(--icon-color);\n"
        "\t\t}\n"
    )


def render_demo(
    *,
    title: str,
    embedded: bool,
    records: Sequence[IconRecord],
    stylesheet: str,
    icon_selector: str,
    source_directory: Path,
    output_directory: Path,
    embedded_demo_available: bool = True,
) -> str:
    """Render a self-contained demo page for one output mode."""
    demo_type = "Embedded Icons" if embedded else "Referenced Icons"
    count = len(records)
    if embedded:
        description = (
            f"{count} icons generated with embedded SVG data. These are self-contained; "
            "only the CSS file is needed."
        )
    else:
        description = (
            f"{count} icons generated with references to external SVG files. You'll need both "
            "the CSS and the folder of SVG files to use these icons."
        )
    description = (
        f"{html.escape(description)}<br>Source: {html.escape(str(source_directory))}"
        f"<br>Output: {html.escape(str(output_directory))}"
    )
    if embedded_demo_available:
        file_protocol_hint = (
            f'Serve this directory over HTTP, or open the <a href="../{EMBEDDED_DIR_NAME}/{DEMO_NAME}">'
            "embedded icon demo</a>."
        )
    else:
        file_protocol_hint = "Serve this directory over HTTP to preview them."
    icon_items = "".join(_render_icon_item(record) for record in records)
    color_options = _color_options()
    embedded_flag = ' data-embedded="true"' if embedded else ""

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '\t<meta charset="UTF-8">\n'
        '\t<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"\t<title>{html.escape(title)} - {demo_type}</title>\n"
        "\t<style>\n"
        f"{stylesheet}"
        f"{_PAGE_STYLES}"
        f"\t\t{_demo_icon_styles(icon_selector)}"
        "\t</style>\n"
        "</head>\n"
        f"<body{embedded_flag}>\n"
        '\t<div class="container">\n'
        f"\t\t<h1>{html.escape(title)}</h1>\n"
        f'\t\t<p class="subtitle">{description}</p>\n'
        '\t\t<p class="subtitle-file-protocol">Referenced icons cannot be displayed when the page is '
        f"opened from a file. {file_protocol_hint}</p>\n"
        '\t\t<div id="control-panel">\n'
        '\t\t\t<div class="control-group"><label for="icon-size-select">Size</label>'
        f'<select id="icon-size-select">{_size_options()}</select></div>\n'
        '\t\t\t<div class="control-group"><label for="icon-color-select">Icon Color</label>'
        '<select id="icon-color-select"><option value="#000000" selected>Black</option>'
        f"{color_options}</select></div>\n"
        '\t\t\t<div class="control-group"><label for="background-color-select">Background Color</label>'
        '<select id="background-color-select"><option value="transparent" selected>Transparent</option>'
        f'<option value="#000000">Black</option>{color_options}</select></div>\n'
        '\t\t\t<div class="control-group"><label for="background-shape-select">Background Shape</label>'
        '<select id="background-shape-select"><option value="rounded" selected>Rounded Rectangle</option>'
        '<option value="circle">Circle</option><option value="square">Square</option></select></div>\n'
        '\t\t\t<div class="control-group search-group"><label for="search-input">Search Icon Names</label>'
        '<input type="text" id="search-input" placeholder="Search by name..."></div>\n'
        "\t\t</div>\n"
        f'\t\t<div id="icon-grid">{icon_items}</div>\n'
        "\t</div>\n"
        f"\t<script>{_SCRIPT}\t</script>\n"
        "</body>\n"
        "</html>\n"
    )
