from decimal import ROUND_HALF_UP, Decimal
from typing import List, Sequence, Union
from xml.sax.saxutils import escape

from pydantic import BaseModel, ConfigDict

from ..schemas import RankedLanguage

DEFAULT_TITLE = "github ~ language-stats"


class SvgLayout(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = 600
    base_height: int = 180
    row_height: int = 35
    first_row_y: int = 145
    bar_x: int = 200
    bar_max_width: int = 350
    bar_height: int = 16
    percentage_x: int = 565
    label_width: int = 15

    def height_for(self, rows: int) -> int:
        return self.base_height + rows * self.row_height


DEFAULT_LAYOUT = SvgLayout()


def _num(value: Union[int, float]) -> str:
    # 175.0 -> "175", 318.18... -> shortest round-trip digits, positional below 1e21
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(text), "f")
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{'+' if int(exponent) > 0 else '-'}{abs(int(exponent))}"


def _percent_label(value: float) -> str:
    # ties round away from zero on the exact binary value
    return f"{Decimal(value).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)}%"


def svg_header(width: int, height: int, total_repos: int, title: str = DEFAULT_TITLE) -> List[str]:
    return [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg">',
        "  <defs>",
        "    <style>",
        "      .terminal-text { font-family: 'Monaco', 'Menlo', 'Courier New', monospace; }",
        "      .prompt { fill: #50fa7b; }",
        "      .command { fill: #8be9fd; }",
        "      .output { fill: #f8f8f2; }",
        "      .percentage { fill: #ffb86c; }",
        "      .bar-bg { fill: #44475a; }",
        "      .bar-fill { fill: #50fa7b; }",
        "    </style>",
        "  </defs>",
        "  ",
        f'  <rect width="{width}" height="{height}" fill="#282a36" rx="8"/>',
        "  ",
        f'  <rect width="{width}" height="40" fill="#21222c" rx="8"/>',
        f'  <rect width="{width}" height="40" fill="#21222c"/>',
        '  <circle cx="20" cy="20" r="6" fill="#ff5555"/>',
        '  <circle cx="40" cy="20" r="6" fill="#ffb86c"/>',
        '  <circle cx="60" cy="20" r="6" fill="#50fa7b"/>',
        f'  <text x="{_num(width / 2)}" y="26" class="terminal-text output" font-size="14" text-anchor="middle" opacity="0.8">',
        f"    {escape(title)}",
        "  </text>",
        "  ",
        '  <text x="20" y="70" class="terminal-text prompt" font-size="16" font-weight="bold">',
        "    $",
        "  </text>",
        '  <text x="35" y="70" class="terminal-text command" font-size="16">',
        f"    analyze --repos={total_repos}",
        "  </text>",
        "  ",
        '  <text x="20" y="100" class="terminal-text output" font-size="14" opacity="0.7">',
        f"    Analyzing {total_repos} repositories...",
        "  </text>",
        "  ",
        f'  <line x1="20" y1="115" x2="{width - 20}" y2="115" stroke="#44475a" stroke-width="1"/>',
    ]


def language_bars(
    top_languages: Sequence[RankedLanguage], layout: SvgLayout = DEFAULT_LAYOUT
) -> List[str]:
    bars: List[str] = []
    for index, item in enumerate(top_languages):
        y = layout.first_row_y + index * layout.row_height
        bar_width = item.percentage * layout.bar_max_width / 100
        bars.extend(
            [
                "",
                f'  <text x="20" y="{y}" class="terminal-text output" font-size="15">',
                f"    {escape(item.language.ljust(layout.label_width))}",
                "  </text>",
                "  ",
                f'  <rect x="{layout.bar_x}" y="{y - 12}" width="{layout.bar_max_width}" '
                f'height="{layout.bar_height}" class="bar-bg" rx="2"/>',
                f'  <rect x="{layout.bar_x}" y="{y - 12}" width="{_num(bar_width)}" '
                f'height="{layout.bar_height}" class="bar-fill" rx="2"/>',
                "  ",
                f'  <text x="{layout.percentage_x}" y="{y}" class="terminal-text percentage" '
                'font-size="15" text-anchor="end" font-weight="bold">',
                f"    {_percent_label(item.percentage)}",
                "  </text>",
            ]
        )
    return bars


def svg_footer(height: int) -> List[str]:
    return [
        "",
        "  ",
        f'  <text x="20" y="{height - 20}" class="terminal-text prompt" font-size="14">',
        "    $",
        "  </text>",
        f'  <text x="35" y="{height - 20}" class="terminal-text output" font-size="14" opacity="0.5">',
        "    █",
        "  </text>",
        "</svg>",
    ]


def render_svg(
    top_languages: Sequence[RankedLanguage],
    total_repos: int,
    title: str = DEFAULT_TITLE,
    layout: SvgLayout = DEFAULT_LAYOUT,
) -> str:
    height = layout.height_for(len(top_languages))
    parts = [
        *svg_header(layout.width, height, total_repos, title),
        *language_bars(top_languages, layout),
        *svg_footer(height),
    ]
    return "\n".join(parts)
