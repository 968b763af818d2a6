import json

import pytest
from typer.testing import CliRunner

from book import Book, Category
from config import settings
from errors import ReportError
from library import Library
from main import app
from report import ReportWriter

runner = CliRunner()

PRIDE_ISSUED = "101   Pride_and_Prejudice      Jane Austen         Issued"
PRIDE_AVAILABLE = "101   Pride_and_Prejudice      Jane Austen         Available"


@pytest.fixture
def report_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path / "issued_books.txt"

def run_menu(*lines, args=None, report_file=None):
    argv = list(args or [])
    if report_file is not None:
        argv += ["--report-file", str(report_file)]
    return runner.invoke(app, argv, input="\n".join(lines) + "\n")


def test_exit_immediately(report_file):
    result = run_menu("0", report_file=report_file)
    assert result.exit_code == 0
    assert "Exiting system..." in result.output

def test_list_seeded_books(report_file):
    result = run_menu("1", "0", report_file=report_file)
    assert result.exit_code == 0
    assert PRIDE_AVAILABLE in result.output
    assert "Physics_Fundamentals" in result.output
    assert "World_History" in result.output
    assert "Total Books: 3" in result.output

def test_no_seed_starts_empty(report_file):
    result = run_menu("1", "0", args=["--no-seed"], report_file=report_file)
    assert result.exit_code == 0
    assert "Total Books: 0" in result.output

def test_seed_disabled_by_settings(report_file, monkeypatch):
    monkeypatch.setattr(settings, "seed_catalog", False)
    result = run_menu("1", "0", report_file=report_file)
    assert "Total Books: 0" in result.output

def test_end_to_end_issue_list_remove(report_file):
    result = run_menu(
        "6", "101",      # issue
        "4", "101",      # search by id
        "1",             # list
        "3", "201",      # remove
        "1",             # list
        "4", "201",      # search removed id
        "0",
        report_file=report_file,
    )
    assert result.exit_code == 0
    assert "Book issued successfully!" in result.output
    assert PRIDE_ISSUED in result.output
    assert "Total Books: 3" in result.output
    assert "Book removed." in result.output
    assert "Total Books: 2" in result.output
    assert "Not found." in result.output

def test_add_book_and_find_by_title(report_file):
    result = run_menu(
        "2", "401", "Dune", "Frank Herbert", "1",
        "5", "Dune",
        "1",
        "0",
        report_file=report_file,
    )
    assert result.exit_code == 0
    assert "Book added" in result.output
    assert "401   Dune" in result.output
    assert "Total Books: 4" in result.output

def test_add_with_invalid_type(report_file):
    result = run_menu("2", "401", "Dune", "Frank Herbert", "7", "1", "0", report_file=report_file)
    assert result.exit_code == 0
    assert "Invalid Type!" in result.output
    assert "Total Books: 3" in result.output

def test_add_duplicate_id_reports_error_and_continues(report_file):
    result = run_menu("2", "101", "Emma", "Jane Austen", "1", "1", "0", report_file=report_file)
    assert result.exit_code == 0
    assert "Book ID 101 already exists!" in result.output
    assert "Total Books: 3" in result.output
    assert "Exiting system..." in result.output

def test_issue_twice_and_bad_return(report_file):
    result = run_menu("6", "101", "6", "101", "7", "301", "7", "101", "0", report_file=report_file)
    assert result.exit_code == 0
    assert "Book already issued!" in result.output
    assert "Book was not issued!" in result.output
    assert "Book returned successfully!" in result.output

def test_unknown_book_messages(report_file):
    result = run_menu("3", "999", "6", "999", "7", "999", "8", "999", "0", report_file=report_file)
    assert result.exit_code == 0
    assert result.output.count("Book not found.") == 4
    assert not report_file.exists()

@pytest.mark.parametrize("choice", ["42", "-1", "abc", ""])
def test_invalid_choice(report_file, choice):
    result = run_menu(choice, "0", report_file=report_file)
    assert result.exit_code == 0
    assert "Invalid choice!" in result.output
    assert "Exiting system..." in result.output

def test_non_numeric_id_is_reported(report_file):
    result = run_menu("4", "abc", "0", report_file=report_file)
    assert result.exit_code == 0
    assert "Invalid book ID" in result.output

def test_save_report(report_file):
    result = run_menu("8", "101", "8", "301", "0", report_file=report_file)
    assert result.exit_code == 0
    assert result.output.count("Book details saved to file.") == 2
    lines = report_file.read_text(encoding="utf-8").splitlines()
    assert [line.split()[0] for line in lines] == ["101", "301"]
    assert all(line.rstrip().endswith("Issued Book Saved") for line in lines)

def test_save_report_failure_is_not_fatal(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    bad = tmp_path / "missing" / "report.txt"
    result = run_menu("8", "101", "1", "0", report_file=bad)
    assert result.exit_code == 0
    assert "Cannot open file" in result.output
    assert "Total Books: 3" in result.output

def test_fine_calculation(report_file):
    result = run_menu("9", "10.50 5.25", "0", report_file=report_file)
    assert result.exit_code == 0
    assert "Total Fine Amount: Rs 15.75" in result.output

def test_fine_calculation_bad_input(report_file):
    result = run_menu("9", "10.50", "9", "ten 5", "0", report_file=report_file)
    assert result.exit_code == 0
    assert "Enter exactly two amounts." in result.output
    assert "Invalid amount" in result.output

def test_end_of_input_terminates(report_file):
    result = runner.invoke(app, ["--report-file", str(report_file)], input="1\n")
    assert result.exit_code == 0
    assert "Total Books: 3" in result.output

def test_json_output(report_file):
    result = run_menu("9", "1 2", "4", "201", "0", args=["--output", "json"], report_file=report_file)
    assert result.exit_code == 0
    # Prompts end without a newline, so payloads share a line with them
    json_lines = [line[line.index("{"):] for line in result.output.splitlines() if "{" in line]
    fine_payload = json.loads(json_lines[0])
    book_payload = json.loads(json_lines[1])
    assert fine_payload == {"amount": 3.0, "currency": "Rs"}
    assert book_payload["title"] == "Physics_Fundamentals"
    assert book_payload["fine_rate"] == 3.5

def test_unexpected_error_does_not_stop_menu(report_file, monkeypatch):
    def boom(self, book, filename=None):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(ReportWriter, "append", boom)
    result = run_menu("8", "101", "0", report_file=report_file)
    assert result.exit_code == 0
    assert "disk on fire" in result.output
    assert "Exiting system..." in result.output

def test_report_error_is_library_error_from_menu(report_file, monkeypatch):
    def fail(self, book, filename=None):
        raise ReportError("Cannot open file: locked.txt")

    monkeypatch.setattr(ReportWriter, "append", fail)
    result = run_menu("8", "101", "0", report_file=report_file)
    assert result.exit_code == 0
    assert "Cannot open file: locked.txt" in result.output

def test_run_menu_directly(monkeypatch, capsys):
    import main

    lib = Library([Book(1, "Only", "One", Category.HISTORY)])
    answers = iter(["6", "1", "1", "0"])
    monkeypatch.setattr(main.Prompt, "ask", lambda *a, **k: next(answers))

    main.run_menu(lib)

    out = capsys.readouterr().out
    assert lib.find_book(1).issued is True
    assert "Total Books: 1" in out

def test_interrupt_exits_cleanly(report_file, monkeypatch):
    import main

    def interrupt(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(main.Prompt, "ask", interrupt)
    result = runner.invoke(app, ["--no-seed", "--report-file", str(report_file)])
    assert result.exit_code == 0
    assert "Exiting system..." in result.output
