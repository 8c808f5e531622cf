import sys
from pathlib import Path
from decimal import Decimal

# Add src and project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / 'src'))
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import openpyxl
import pytest

from processors.contribution_table_generator import ContributionTableGenerator


@pytest.fixture
def generator(tmp_path):
    return ContributionTableGenerator(output_dir=tmp_path)


def test_socso_rows(generator):
    rows = generator.socso_rows()

    assert len(rows) == 55
    assert rows[0] == (Decimal('0'), Decimal('30'), Decimal('0.40'), Decimal('0.10'), Decimal('0.50'))
    assert rows[7] == (Decimal('300.01'), Decimal('400'), Decimal('6.15'), Decimal('1.75'), Decimal('7.90'))
    assert rows[-2][1] == Decimal('5000')
    assert rows[-1] == (Decimal('5000.01'), None, Decimal('86.65'), Decimal('24.75'), Decimal('111.40'))


def test_eis_rows(generator):
    rows = generator.eis_rows()

    assert len(rows) == 32
    assert rows[0] == (Decimal('0'), Decimal('1000'), Decimal('1.90'), Decimal('1.90'), Decimal('3.80'))
    assert rows[1] == (Decimal('1000.01'), Decimal('1100'), Decimal('2.10'), Decimal('2.10'), Decimal('4.20'))
    assert rows[-1] == (Decimal('4000.01'), None, Decimal('7.90'), Decimal('7.90'), Decimal('15.80'))


def test_rows_are_contiguous_and_non_decreasing(generator):
    for rows in (generator.socso_rows(), generator.eis_rows()):
        for previous, current in zip(rows, rows[1:]):
            assert current[0] == previous[1] + Decimal('0.01')
            assert current[2] >= previous[2]
            assert current[3] >= previous[3]


def test_generate_workbook(generator, tmp_path):
    filepath = generator.generate()

    assert Path(filepath) == tmp_path / "contribution_tables.xlsx"
    assert Path(filepath).exists()

    wb = openpyxl.load_workbook(filepath)
    assert wb.sheetnames == ["PERKESO", "SIP"]

    ws = wb["PERKESO"]
    assert ws['A1'].value == "SOCSO (PERKESO) - Jenis Pertama"
    assert ws['A3'].value == "Wages From (RM)"
    assert ws['B4'].value == 30
    assert ws['C4'].value == pytest.approx(0.40)
    assert ws['D4'].value == pytest.approx(0.10)
    assert ws.max_row == 58
    assert ws[f'B{ws.max_row}'].value == "and above"
    assert ws[f'C{ws.max_row}'].value == pytest.approx(86.65)

    ws = wb["SIP"]
    assert ws['A1'].value == "EIS (SIP)"
    assert ws.max_row == 35
    assert ws[f'D{ws.max_row}'].value == pytest.approx(7.90)


def test_generate_rejects_non_xlsx_filename(generator):
    with pytest.raises(ValueError):
        generator.generate("tables.csv")
