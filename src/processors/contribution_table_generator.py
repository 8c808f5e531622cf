import logging
import openpyxl
from openpyxl.styles import Font, Alignment, Border, Side, PatternFill
from pathlib import Path
from typing import List, Optional, Tuple
from decimal import Decimal
from processors.contribution_tables import (
    SOCSO_FIXED_BRACKETS,
    SOCSO_BAND_WIDTH,
    EIS_FLAT_WAGE,
    EIS_BAND_WIDTH,
    social_security_contribution,
    insurance_contribution,
)
from config.settings import OUTPUT_DIR, SOCSO_WAGE_CEILING, EIS_WAGE_CEILING

logger = logging.getLogger(__name__)

# (wage from, wage to, employer, employee, total); wage to is None for the open top band
TableRow = Tuple[Decimal, Optional[Decimal], Decimal, Decimal, Decimal]

CENT = Decimal('0.01')

class ContributionTableGenerator:
    """Generate SOCSO and EIS contribution schedules as an Excel workbook"""

    def __init__(self, output_dir: Optional[Path] = None):
        self.output_dir = Path(output_dir) if output_dir else OUTPUT_DIR / "tables"
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def socso_rows(self) -> List[TableRow]:
        """SOCSO bands: the fixed bands up to 300, then 100-unit bands up to the ceiling"""
        limits = [limit for limit, _, _ in SOCSO_FIXED_BRACKETS]
        limit = limits[-1] + SOCSO_BAND_WIDTH
        while limit <= SOCSO_WAGE_CEILING:
            limits.append(limit)
            limit += SOCSO_BAND_WIDTH

        rows = []
        wage_from = Decimal('0')
        for limit in limits:
            pair = social_security_contribution(limit)
            rows.append((wage_from, limit, pair.employer, pair.employee, pair.employer + pair.employee))
            wage_from = limit + CENT

        pair = social_security_contribution(SOCSO_WAGE_CEILING)
        rows.append((wage_from, None, pair.employer, pair.employee, pair.employer + pair.employee))
        return rows

    def eis_rows(self) -> List[TableRow]:
        """EIS bands: flat band up to 1000, then 100-unit bands up to the ceiling"""
        rows = []
        wage_from = Decimal('0')
        limit = EIS_FLAT_WAGE
        while limit <= EIS_WAGE_CEILING:
            amount = insurance_contribution(limit)
            rows.append((wage_from, limit, amount, amount, amount + amount))
            wage_from = limit + CENT
            limit += EIS_BAND_WIDTH

        amount = insurance_contribution(EIS_WAGE_CEILING)
        rows.append((wage_from, None, amount, amount, amount + amount))
        return rows

    def generate(self, filename: str = "contribution_tables.xlsx") -> str:
        """Generate the contribution tables workbook"""

        if not filename.endswith(".xlsx"):
            raise ValueError(f"Workbook filename must end with .xlsx: {filename}")

        # Create workbook
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = "PERKESO"
        self._write_sheet(ws, "SOCSO (PERKESO) - Jenis Pertama", self.socso_rows())

        ws = wb.create_sheet("SIP")
        self._write_sheet(ws, "EIS (SIP)", self.eis_rows())

        filepath = self.output_dir / filename
        wb.save(filepath)
        logger.info("Contribution tables written to %s", filepath)

        return str(filepath)

    def _write_sheet(self, ws, title: str, rows: List[TableRow]):
        """Write one contribution schedule to a worksheet"""

        # Set column widths
        for col in ['A', 'B', 'C', 'D', 'E']:
            ws.column_dimensions[col].width = 16

        # Define styles
        header_font = Font(bold=True, size=12)
        bold_font = Font(bold=True)
        header_fill = PatternFill(start_color="B4C7E7", end_color="B4C7E7", fill_type="solid")
        thin_border = Border(
            left=Side(style='thin'),
            right=Side(style='thin'),
            top=Side(style='thin'),
            bottom=Side(style='thin')
        )

        # Title
        row = 1
        ws.merge_cells(f'A{row}:E{row}')
        ws[f'A{row}'] = title
        ws[f'A{row}'].font = header_font
        ws[f'A{row}'].alignment = Alignment(horizontal='center')

        # Headers
        row = 3
        headers = ['Wages From (RM)', 'Wages To (RM)', 'Employer (RM)', 'Employee (RM)', 'Total (RM)']
        for col_idx, header in enumerate(headers, start=1):
            cell = ws.cell(row=row, column=col_idx)
            cell.value = header
            cell.font = bold_font
            cell.fill = header_fill
            cell.border = thin_border
            cell.alignment = Alignment(horizontal='center', vertical='center', wrap_text=True)

        # Data rows
        row = 4
        for wage_from, wage_to, employer, employee, total in rows:
            ws[f'A{row}'] = float(wage_from)
            ws[f'B{row}'] = float(wage_to) if wage_to is not None else "and above"
            ws[f'C{row}'] = float(employer)
            ws[f'D{row}'] = float(employee)
            ws[f'E{row}'] = float(total)

            for col_idx in range(1, 6):
                ws.cell(row=row, column=col_idx).border = thin_border
            for col in ['A', 'B', 'C', 'D', 'E']:
                ws[f'{col}{row}'].number_format = '#,##0.00'

            row += 1
