"""
Export student records to Excel workbooks and CSV files.
"""

import csv
import logging
from typing import Dict, List, Optional

import openpyxl
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side

from database import Student

logger = logging.getLogger(__name__)

STUDENT_HEADERS = [
    'Roll No', 'Name', 'Department', 'Email', 'Phone',
    'Sub1', 'Sub2', 'Sub3', 'Percentage', 'Grade',
]


def _autosize_columns(ws, max_width: int = 50):
    for col_idx, column in enumerate(ws.columns, 1):
        max_length = 0
        column_letter = openpyxl.utils.get_column_letter(col_idx)
        for cell in column:
            if cell.value is not None and len(str(cell.value)) > max_length:
                max_length = len(str(cell.value))
        ws.column_dimensions[column_letter].width = min(max_length + 2, max_width)


def export_students_to_excel(students: List[Student], filename: str,
                             summary: Optional[Dict] = None) -> str:
    """
    Write students (and optionally a statistics summary) to an .xlsx workbook.

    Args:
        students: Records to write, one row each
        filename: Target path; '.xlsx' is appended if missing
        summary: Optional dictionary from StatisticsQueries.summary()

    Returns:
        The path that was written
    """
    if not filename.endswith('.xlsx'):
        filename += '.xlsx'

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Students"

    # Styling
    header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF", size=11)
    border = Border(
        left=Side(style='thin'),
        right=Side(style='thin'),
        top=Side(style='thin'),
        bottom=Side(style='thin')
    )

    # Title row
    ws.merge_cells('A1:J1')
    title_cell = ws['A1']
    title_cell.value = "Student Records"
    title_cell.font = Font(bold=True, size=14)
    title_cell.alignment = Alignment(horizontal='center')

    ws.append([])  # Empty row
    ws.append(STUDENT_HEADERS)
    for cell in ws[3]:
        cell.fill = header_fill
        cell.font = header_font
        cell.border = border
        cell.alignment = Alignment(horizontal='center')

    for student in students:
        ws.append([
            student.roll_no,
            student.name,
            student.department,
            student.email,
            student.phone,
            student.sub1,
            student.sub2,
            student.sub3,
            student.percentage,
            student.grade,
        ])

    _autosize_columns(ws)
    ws.freeze_panes = 'A4'

    if summary is not None:
        _create_summary_sheet(wb, summary, header_fill, header_font)

    wb.save(filename)
    logger.info(f"Exported {len(students)} student(s) to {filename}")
    return filename


def _create_summary_sheet(wb, summary: Dict, header_fill, header_font):
    ws = wb.create_sheet("Summary")

    ws.merge_cells('A1:B1')
    title_cell = ws['A1']
    title_cell.value = "Statistics"
    title_cell.font = Font(bold=True, size=14)

    ws.append([])  # Empty row
    ws.append(['Total Students', summary['total_students']])
    ws.append(['Highest Percentage', summary['highest_percentage']])
    ws.append(['Lowest Percentage', summary['lowest_percentage']])

    ws.append([])
    ws.append(['Grade', 'Count'])
    for cell in ws[ws.max_row]:
        cell.fill = header_fill
        cell.font = header_font
    for grade, count in summary.get('grade_distribution', {}).items():
        ws.append([grade, count])

    ws.column_dimensions['A'].width = 25
    ws.column_dimensions['B'].width = 15


def export_students_to_csv(students: List[Student], filename: str) -> str:
    """
    Write students to a CSV file with one column per field.

    Returns:
        The path that was written
    """
    if not filename.endswith('.csv'):
        filename += '.csv'

    rows = [student.to_dict() for student in students]
    fieldnames = list(rows[0].keys()) if rows else list(Student().to_dict().keys())

    with open(filename, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)

    logger.info(f"Exported {len(students)} student(s) to {filename}")
    return filename
