"""Named example payloads for each chart tool.

Registered tool descriptions embed these so clients can discover working
argument shapes without reading the docs.
"""

import json
from typing import Any, Dict

MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]

TOOL_EXAMPLES: Dict[str, Dict[str, Dict[str, Any]]] = {
    "create_line_chart": {
        "simple": {
            "data": [10, 25, 30, 45, 60],
            "title": "Sales Growth",
            "width": 50,
            "height": 12,
        },
        "with_labels": {
            "data": [23, 45, 56, 78, 32, 45],
            "labels": MONTHS,
            "title": "Monthly Revenue",
            "color": "green",
        },
        "temporal": {
            "data": [100, 120, 90, 140, 160, 180, 150, 200],
            "labels": ["Q1", "Q2", "Q3", "Q4", "Q1", "Q2", "Q3", "Q4"],
            "title": "Quarterly Performance",
            "width": 60,
            "height": 15,
            "color": "blue",
        },
    },
    "create_bar_chart": {
        "horizontal": {
            "data": [85, 67, 54, 92],
            "labels": ["Frontend", "Backend", "DevOps", "QA"],
            "title": "Team Performance",
            "orientation": "horizontal",
        },
        "vertical": {
            "data": [12, 19, 15, 25, 22, 18],
            "labels": MONTHS,
            "title": "Monthly Sales",
            "orientation": "vertical",
            "color": "cyan",
        },
        "comparison": {
            "data": [45, 55, 60, 40, 70],
            "labels": ["Product A", "Product B", "Product C", "Product D", "Product E"],
            "title": "Product Comparison",
            "width": 70,
            "height": 18,
        },
    },
    "create_scatter_plot": {
        "correlation": {
            "data": [1, 2, 3, 5, 8, 13, 21, 34],
            "title": "Fibonacci Growth",
            "width": 50,
            "height": 12,
        },
        "distribution": {
            "data": [12, 15, 18, 22, 19, 25, 30, 28, 35, 40],
            "title": "Data Distribution",
            "color": "magenta",
        },
        "trend": {
            "data": [100, 110, 105, 115, 120, 125, 130, 128, 135],
            "title": "Upward Trend",
            "width": 60,
            "height": 15,
            "show_trend_line": True,
        },
    },
    "create_histogram": {
        "distribution": {
            "data": [1, 2, 2, 3, 3, 3, 4, 4, 5, 6, 6, 7, 8, 9],
            "title": "Value Distribution",
            "bins": 5,
        },
        "performance": {
            "data": [85, 87, 90, 92, 88, 91, 89, 93, 86, 94, 88, 90, 92],
            "title": "Response Times (ms)",
            "bins": 8,
            "color": "yellow",
        },
        "wide_range": {
            "data": [3, 7, 12, 18, 21, 25, 29, 33, 38, 41, 47, 52, 55, 61, 66, 70, 74, 79, 85, 92],
            "title": "Wide Range Sample",
            "bins": 10,
            "width": 70,
        },
    },
    "create_sparkline": {
        "compact": {
            "data": [1, 3, 2, 5, 4, 7, 6, 8],
            "title": "Quick Trend",
        },
        "metrics": {
            "data": [23, 25, 22, 28, 30, 27, 31, 29, 33],
            "title": "System Load",
            "color": "red",
            "width": 30,
        },
        "inline": {
            "data": [100, 102, 98, 105, 110, 108, 112],
            "width": 25,
        },
    },
}


def describe_with_examples(description: str, tool_name: str) -> str:
    """Append the tool's examples, one compact JSON payload per line."""
    examples = TOOL_EXAMPLES.get(tool_name)
    if not examples:
        return description
    lines = [description, "", "Examples:"]
    for name, payload in examples.items():
        lines.append(f"- {name}: {json.dumps(payload, separators=(',', ':'))}")
    return "\n".join(lines)
