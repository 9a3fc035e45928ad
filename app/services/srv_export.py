import logging
from datetime import date
from io import BytesIO
from typing import Optional, Tuple
from fastapi import Depends
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from app.helpers.date_range import check_date_range
from app.models.model_user import User
from app.repository.repo_procedure import ProcedureRepository

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'

# (header, width)
COLUMNS = [
    ('Date', 12),
    ('Time', 10),
    ('Procedure Name', 30),
    ('Notes', 50),
]
HEADER_FILL = PatternFill(fill_type='solid', start_color='FFE0E0E0', end_color='FFE0E0E0')


class ProcedureExportService:
    def __init__(self, procedure_repo: ProcedureRepository = Depends()):
        self.procedure_repo = procedure_repo

    def export_records(self, current_user: User, start_date: date, end_date: date,
                       procedure_id: Optional[int] = None) -> Tuple[str, bytes]:
        """
        Build an .xlsx workbook of the caller's procedure records in the given range.

        Returns the attachment filename and the workbook bytes. Rows are ordered
        oldest first; dates are rendered DD/MM/YYYY and times HH:MM (24h).
        """
        check_date_range(start_date, end_date)
        records = self.procedure_repo.get_records(
            current_user.id, start_date, end_date, procedure_id, oldest_first=True
        )

        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = 'Procedure Records'

        worksheet.append([header for header, _ in COLUMNS])
        for index, (_, width) in enumerate(COLUMNS, start=1):
            worksheet.column_dimensions[get_column_letter(index)].width = width
        for cell in worksheet[1]:
            cell.font = Font(bold=True)
            cell.fill = HEADER_FILL

        for record in records:
            worksheet.append([
                record.procedure_date.strftime('%d/%m/%Y'),
                record.performed_at.strftime('%H:%M') if record.performed_at else '',
                record.procedure_name,
                record.notes or '',
            ])

        buffer = BytesIO()
        workbook.save(buffer)
        logger.info(f"Exported {len(records)} procedure records for user_id={current_user.id}")
        filename = f"procedure_records_{start_date.isoformat()}_to_{end_date.isoformat()}.xlsx"
        return filename, buffer.getvalue()
