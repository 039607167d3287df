"""Renderers that turn TableViews into output.

- Plain-text tables for the console
- JSON documents for a web front end
- Excel workbooks with difficulty-colored cells
"""

import logging
import re
from pathlib import Path
from typing import Any, Optional

import openpyxl
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter

from .difficulty import DifficultyBucket
from .models import FixtureCell, GridRow, TableView
from .utils import save_json

logger = logging.getLogger('cleansheet.render')

# Buckets whose fill is dark enough to need white text
DARK_BUCKETS = {
    DifficultyBucket.VERY_EASY,
    DifficultyBucket.HARD,
    DifficultyBucket.VERY_HARD,
    DifficultyBucket.HARDEST,
}


def format_cell_text(cell: FixtureCell) -> str:
    """One-line cell text: 'ARS (1-2)', '@CHE/LIV (6)' or the blank marker."""
    if cell.is_blank:
        return cell.text
    return f"{'/'.join(cell.labels)} ({cell.bucket.value})"


def render_text_table(view: TableView) -> str:
    """Render a view as a fixed-width text table."""
    body = [row.leading_columns + [format_cell_text(c) for c in row.cells] for row in view.rows]
    widths = [len(h) for h in view.headers]
    for line in body:
        widths = [max(w, len(value)) for w, value in zip(widths, line)]

    def fmt(values: list[str]) -> str:
        return '  '.join(f'{v:<{w}}' for v, w in zip(values, widths)).rstrip()

    separator = '-' * (sum(widths) + 2 * (len(widths) - 1))
    lines = [view.title, separator, fmt(view.headers), separator]
    lines.extend(fmt(line) for line in body)
    lines.append(separator)
    return '\n'.join(lines)


def cell_to_dict(cell: FixtureCell) -> dict[str, Any]:
    return {
        'gameweek': cell.gameweek,
        'kind': cell.kind,
        'labels': cell.labels,
        'difficulty': cell.difficulty,
        'bucket': cell.bucket.value if cell.bucket else None,
        'css_class': cell.bucket.css_class if cell.bucket else 'blank',
    }


def view_to_dict(view: TableView) -> dict[str, Any]:
    """Serialize a view to plain JSON-compatible data."""
    rows = []
    for row in view.rows:
        entry: dict[str, Any] = {
            'columns': row.leading_columns,
            'cells': [cell_to_dict(c) for c in row.cells],
        }
        if isinstance(row, GridRow):
            entry['team_id'] = row.team_id
            entry['strength_bucket'] = row.strength_bucket.value
        else:
            entry['player_id'] = row.pick.player_id
            entry['team_id'] = row.pick.team_id
        rows.append(entry)

    return {
        'title': view.title,
        'headers': view.headers,
        'gameweeks': view.gameweeks,
        'rows': rows,
    }


def export_views_json(
    path: Path | str,
    grid: TableView,
    squad: Optional[TableView] = None,
    share_url: Optional[str] = None,
) -> None:
    """Write the grid (and squad, when loaded) to a JSON file."""
    data = {
        'fixtures': view_to_dict(grid),
        'squad': view_to_dict(squad) if squad else None,
        'share_url': share_url,
    }
    save_json(path, data)
    logger.info(f'Views saved to {path}')


def sheet_title(title: str) -> str:
    """Excel-safe sheet name: no []:*?/\\ and at most 31 characters."""
    cleaned = re.sub(r'[\[\]:*?/\\]', '', title or '').strip()[:31]
    return cleaned or 'My Team'


def _bucket_style(cell, bucket: DifficultyBucket) -> None:
    cell.fill = PatternFill(fill_type='solid', start_color=bucket.color, end_color=bucket.color)
    cell.font = Font(color='FFFFFF' if bucket in DARK_BUCKETS else '000000')


def _write_sheet(ws, view: TableView) -> None:
    for col, header in enumerate(view.headers, 1):
        cell = ws.cell(row=1, column=col, value=header)
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal='center')

    for row_idx, row in enumerate(view.rows, 2):
        leading = row.leading_columns
        for col, value in enumerate(leading, 1):
            ws.cell(row=row_idx, column=col, value=value)

        if isinstance(row, GridRow):
            # Strength column shares the difficulty palette
            _bucket_style(ws.cell(row=row_idx, column=2), row.strength_bucket)

        for offset, fixture_cell in enumerate(row.cells):
            cell = ws.cell(row=row_idx, column=len(leading) + 1 + offset, value=fixture_cell.text)
            cell.alignment = Alignment(horizontal='center', vertical='center', wrap_text=True)
            if fixture_cell.bucket is not None:
                _bucket_style(cell, fixture_cell.bucket)

    for col in range(1, len(view.headers) + 1):
        ws.column_dimensions[get_column_letter(col)].width = 12
    ws.freeze_panes = 'B2'


def export_workbook(
    path: Path | str,
    grid: TableView,
    squad: Optional[TableView] = None,
) -> None:
    """Write the grid (and squad, when loaded) to an .xlsx workbook."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = 'Fixtures'
    _write_sheet(ws, grid)

    if squad is not None:
        _write_sheet(wb.create_sheet(title=sheet_title(squad.title)), squad)

    wb.save(path)
    wb.close()
    logger.info(f'Workbook saved to {path}')
