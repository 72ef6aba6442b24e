import csv

import openpyxl
import pytest

from import_students import load_students_csv, import_students
from queries.export import export_students_to_excel, export_students_to_csv


CSV_TEXT = """name,roll_no,department,email,phone,sub1,sub2,sub3
Alice Smith,R001,Computer Science,alice@example.com,555-0101,80,90,70
Bob Stone,R002,Physics,,555-0102,100,100,99
Carol Day,0042,Math,carol@example.com,,50,,40
"""


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "students.csv"
    path.write_text(CSV_TEXT)
    return path


class TestLoadStudentsCsv:
    def test_derives_percentage_and_grade(self, csv_file):
        students = load_students_csv(csv_file)

        assert [s.roll_no for s in students] == ["R001", "R002", "0042"]
        assert students[0].percentage == 80.0
        assert students[0].grade == 'B'
        assert students[1].percentage == 99.67
        assert students[1].grade == 'A'

    def test_fills_missing_values(self, csv_file):
        students = load_students_csv(csv_file)

        assert students[1].email == ""
        assert students[2].phone == ""
        assert students[2].sub2 == 0.0
        assert students[2].percentage == 30.0
        assert students[2].grade == 'F'

    def test_rejects_missing_columns(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("name,roll_no\nAlice,R001\n")
        with pytest.raises(ValueError, match="sub1"):
            load_students_csv(path)

    def test_records_are_unsaved(self, csv_file):
        assert all(s.id is None for s in load_students_csv(csv_file))


def test_import_students_adds_every_row(store, stats, csv_file):
    assert import_students(store, csv_file) == 3
    assert stats.total_count() == 3
    assert store.search_by_roll_no("0042")[0].name == "Carol Day"


class TestExport:
    @pytest.fixture
    def students(self, store, make_student):
        store.add(make_student("R001", name="Alice Smith"))
        store.add(make_student("R002", name="Bob Stone", sub1=40, sub2=40, sub3=40))
        return store.get_all()

    def test_excel_workbook(self, tmp_path, students, stats):
        path = export_students_to_excel(students, str(tmp_path / "report"), summary=stats.summary())

        assert path.endswith(".xlsx")
        wb = openpyxl.load_workbook(path)
        assert wb.sheetnames == ["Students", "Summary"]

        ws = wb["Students"]
        assert ws["A3"].value == "Roll No"
        assert ws["A4"].value == "R001"
        assert ws["B5"].value == "Bob Stone"
        assert ws["J5"].value == "F"

        summary = wb["Summary"]
        assert summary["A3"].value == "Total Students"
        assert summary["B3"].value == 2

    def test_excel_without_summary(self, tmp_path, students):
        path = export_students_to_excel(students, str(tmp_path / "plain.xlsx"))
        assert openpyxl.load_workbook(path).sheetnames == ["Students"]

    def test_csv_file(self, tmp_path, students):
        path = export_students_to_csv(students, str(tmp_path / "report"))

        with open(path, newline='') as f:
            rows = list(csv.DictReader(f))

        assert [row['roll_no'] for row in rows] == ["R001", "R002"]
        assert rows[0]['grade'] == 'B'
        assert float(rows[1]['percentage']) == 40.0

    def test_csv_with_no_students_writes_header(self, tmp_path):
        path = export_students_to_csv([], str(tmp_path / "empty.csv"))
        with open(path, newline='') as f:
            assert next(csv.reader(f))[:3] == ['id', 'roll_no', 'name']
