"""Spreadsheet import and export."""

import zipfile
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

from openpyxl import Workbook, load_workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from worklog.database.base import Database
from worklog.domain.classifier import category_color, category_name
from worklog.domain.entities import DayLog, ImportResult
from worklog.domain.errors import ImportFileError, storage_errors
from worklog.domain.report import ReportBuilder, sort_logs
from worklog.utils.date_parser import date_key, parse_log_date
from worklog.utils.logging import get_logger

logger = get_logger(__name__)

DATE_COLUMNS = ("Data (YYYY-MM-DD)", "Data")
PROJECTS_COLUMN = "Projetos"
DESCRIPTION_COLUMN = "Descrição"
FILES_COLUMN = "Arquivos"

PLAIN_SHEET = "Registros"
SUMMARY_SHEET = "Resumo Geral"
DETAIL_SHEET = "Detalhes por Projeto"
STATS_SHEET = "Estatísticas"

_WHITE_BOLD = Font(bold=True, color="FFFFFF")
_CENTERED = Alignment(horizontal="center", vertical="center")


def _fill(color: str) -> PatternFill:
    return PatternFill(fill_type="solid", fgColor=color)


def _write_header(sheet: Worksheet, columns: Sequence[tuple[str, int]], color: Optional[str] = None) -> None:
    sheet.append([title for title, _ in columns])
    for index, (_, width) in enumerate(columns, start=1):
        sheet.column_dimensions[get_column_letter(index)].width = width
        cell = sheet.cell(row=1, column=index)
        if color is None:
            cell.font = Font(bold=True)
            cell.fill = _fill("DDEEFF")
        else:
            cell.font = _WHITE_BOLD
            cell.fill = _fill(color)
            cell.alignment = _CENTERED


def _fill_row(sheet: Worksheet, row: int, color: str) -> None:
    for cell in sheet[row]:
        cell.fill = _fill(color)


def _append_values(sheet: Worksheet, values: Sequence[Any]) -> None:
    """Append a row, keeping text such as '=> ajuste' as text instead of a formula."""
    sheet.append(list(values))
    for cell in sheet[sheet.max_row]:
        if isinstance(cell.value, str):
            cell.data_type = "s"


def build_workbook(logs: Iterable[DayLog], report: Optional[ReportBuilder] = None) -> Workbook:
    """Build the three-sheet report workbook.

    Sheets: general summary per day, file details per project, and file
    counts per project and category.
    """
    report = report or ReportBuilder()
    logs = sort_logs(logs)
    workbook = Workbook()

    summary = workbook.active
    summary.title = SUMMARY_SHEET
    _write_header(
        summary,
        [("Data", 15), (PROJECTS_COLUMN, 25), (DESCRIPTION_COLUMN, 50), ("Total Arquivos", 15)],
        color="4472C4",
    )
    for index, row in enumerate(report.summary_rows(logs)):
        _append_values(summary, [row.date, ", ".join(row.projects), row.description, row.file_count])
        if index % 2 == 0:
            _fill_row(summary, summary.max_row, "F8F9FA")

    details = workbook.create_sheet(DETAIL_SHEET)
    _write_header(
        details,
        [("Data", 15), ("Projeto", 20), ("Categoria", 20), ("Arquivo", 40), (DESCRIPTION_COLUMN, 50)],
        color="70AD47",
    )
    for row in report.detail_rows(logs):
        _append_values(details, [row.date, row.project, category_name(row.category), row.file, row.description])
        details.cell(row=details.max_row, column=3).fill = _fill(category_color(row.category))

    stats = report.statistics(logs)
    stats_sheet = workbook.create_sheet(STATS_SHEET)
    stats_sheet.column_dimensions["A"].width = 30
    stats_sheet.column_dimensions["B"].width = 18

    stats_sheet.append(["Estatísticas por Projeto"])
    stats_sheet.cell(row=stats_sheet.max_row, column=1).font = Font(bold=True, size=14)
    stats_sheet.append(["Projeto", "Total de Arquivos"])
    for index, (project, count) in enumerate(stats.by_project.items()):
        _append_values(stats_sheet, [project, count])
        if index % 2 == 0:
            _fill_row(stats_sheet, stats_sheet.max_row, "E7E6E6")

    stats_sheet.append([])
    stats_sheet.append(["Estatísticas por Categoria"])
    stats_sheet.cell(row=stats_sheet.max_row, column=1).font = Font(bold=True, size=14)
    stats_sheet.append(["Categoria", "Total de Arquivos"])
    for index, (category, count) in enumerate(stats.by_category.items()):
        stats_sheet.append([category_name(category), count])
        if index % 2 == 0:
            _fill_row(stats_sheet, stats_sheet.max_row, "E7E6E6")

    return workbook


def build_plain_workbook(logs: Iterable[DayLog]) -> Workbook:
    """Build the single-sheet workbook in the import format.

    File assignments and category overrides are not part of this format.
    """
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = PLAIN_SHEET
    logs = sort_logs(logs)

    widths = [len(DATE_COLUMNS[0]), len(PROJECTS_COLUMN), len(DESCRIPTION_COLUMN), len(FILES_COLUMN)]
    rows = []
    for log in logs:
        row = [log.date, ", ".join(log.projects), log.description, log.files]
        widths = [max(width, len(value) if value else 10) for width, value in zip(widths, row)]
        rows.append(row)

    _write_header(
        sheet,
        list(zip((DATE_COLUMNS[0], PROJECTS_COLUMN, DESCRIPTION_COLUMN, FILES_COLUMN), widths)),
    )
    for row in rows:
        _append_values(sheet, row)
    return workbook


def save_workbook(workbook: Workbook, path: str | Path) -> Path:
    """Write a workbook to disk and return the path."""
    path = Path(path)
    workbook.save(path)
    logger.info("Wrote workbook %s", path)
    return path


def read_rows(path: str | Path) -> list[dict[str, Any]]:
    """Read the first sheet of a workbook into dicts keyed by header.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ImportFileError: If the file is not a readable workbook
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Spreadsheet not found: {path}")

    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, KeyError, OSError) as e:
        logger.error("Could not read workbook %s: %s", path, e)
        raise ImportFileError(f"Could not read spreadsheet '{path.name}': {e}")

    try:
        sheet = workbook.worksheets[0]
        values = sheet.iter_rows(values_only=True)
        header = next(values, None)
        if header is None:
            return []
        columns = [str(title).strip() if title is not None else "" for title in header]
        rows = []
        for raw in values:
            if raw is None or all(value is None for value in raw):
                continue
            rows.append({column: value for column, value in zip(columns, raw) if column})
        return rows
    finally:
        workbook.close()


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def row_to_log(row: dict[str, Any], user_id: str, year: int, month: int) -> Optional[DayLog]:
    """Turn a spreadsheet row into a DayLog for the given month.

    Returns None for rows without a readable date, rows outside the month,
    and rows with nothing to store.
    """
    raw_date = None
    for column in DATE_COLUMNS:
        if row.get(column):
            raw_date = row[column]
            break

    parsed = parse_log_date(raw_date)
    if parsed is None or parsed.year != year or parsed.month != month:
        return None

    projects = tuple(p.strip() for p in _text(row.get(PROJECTS_COLUMN)).split(",") if p.strip())
    log = DayLog(
        date=date_key(parsed),
        user_id=user_id,
        projects=projects,
        description=_text(row.get(DESCRIPTION_COLUMN)),
        files=_text(row.get(FILES_COLUMN)),
    )
    if log.is_empty:
        return None
    return log


class ImportService:
    """Service for importing day logs from a spreadsheet."""

    def __init__(self, db: Database, user_id: str):
        """Initialize import service.

        Args:
            db: Database instance
            user_id: Owner of the imported logs
        """
        self.db = db
        self.user_id = user_id

    def import_workbook(self, path: str | Path, year: int, month: int) -> ImportResult:
        """Import the rows of a workbook that fall in the given month.

        All records are written in one batch; nothing is written if the
        batch fails. Imported days carry no file assignments.

        Returns:
            ImportResult with imported and skipped row counts

        Raises:
            FileNotFoundError: If the file doesn't exist
            ImportFileError: If the file is not a readable workbook
            StorageError: If the batch write fails
        """
        rows = read_rows(path)

        logs = []
        skipped = 0
        for row_num, row in enumerate(rows, start=2):  # Start at 2 (header is row 1)
            log = row_to_log(row, self.user_id, year, month)
            if log is None:
                logger.debug("Row %d skipped", row_num)
                skipped += 1
                continue
            logs.append(log)

        if logs:
            with storage_errors(logger, "import spreadsheet"):
                self.db.put_logs(logs)
        logger.info("Imported %d rows from %s (%d skipped)", len(logs), path, skipped)
        return ImportResult(imported=len(logs), skipped=skipped)
