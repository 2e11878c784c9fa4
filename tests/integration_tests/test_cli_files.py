# tests/integration_tests/test_cli_files.py
# This file is part of Tempora - A Timestamp-Ordering Schedule Validator
#
# Command-line runs against real files in a temporary directory

"""Integration tests for run_scheduler.main and the file collaborators."""

import pytest
from run_scheduler import main
from utils.example_input import EXAMPLE_INPUT_LINES, write_example_input
from utils.input_reader import read_input
from utils.output_writer import clear_outputs, write_object_logs


def write_input(path, lines):
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


class TestRunScheduler:
    def test_example_run_writes_verdicts_and_logs(self, tmp_path):
        input_path = write_input(tmp_path / "in.txt", EXAMPLE_INPUT_LINES)
        output_path = tmp_path / "out.txt"

        code = main(["-i", str(input_path), "-o", str(output_path), "--log-dir", str(tmp_path)])

        assert code == 0
        verdicts = output_path.read_text(encoding="utf-8").splitlines()
        assert verdicts[0] == "E_1-OK"
        assert verdicts[-1] == "E_9-ROLLBACK-4"
        assert len(verdicts) == 9
        assert (tmp_path / "C.txt").read_text(encoding="utf-8") == (
            "E_4,read,10\nE_5,read,10\nE_6,write,3\n"
        )
        for name in "ABD":
            assert (tmp_path / f"{name}.txt").exists()

    def test_stale_logs_are_replaced(self, tmp_path):
        input_path = write_input(tmp_path / "in.txt", ["A, B", "t1", "1", "E1-r1(A)"])
        (tmp_path / "A.txt").write_text("old,read,0\n", encoding="utf-8")
        (tmp_path / "B.txt").write_text("old,read,0\n", encoding="utf-8")

        code = main(["-i", str(input_path), "-o", str(tmp_path / "out.txt"),
                     "--log-dir", str(tmp_path)])

        assert code == 0
        assert (tmp_path / "A.txt").read_text(encoding="utf-8") == "E1,read,0\n"
        assert not (tmp_path / "B.txt").exists()

    def test_missing_input_creates_example(self, tmp_path):
        input_path = tmp_path / "in.txt"

        code = main(["-i", str(input_path), "-o", str(tmp_path / "out.txt")])

        assert code == 1
        assert read_input(input_path) == list(EXAMPLE_INPUT_LINES)
        assert not (tmp_path / "out.txt").exists()

    def test_missing_input_without_example(self, tmp_path):
        input_path = tmp_path / "in.txt"

        code = main(["-i", str(input_path), "--no-example"])

        assert code == 1
        assert not input_path.exists()

    def test_header_error_exit_code(self, tmp_path):
        input_path = write_input(tmp_path / "in.txt", ["A", "t1, t2", "5"])

        assert main(["-i", str(input_path), "-o", str(tmp_path / "out.txt")]) == 2
        assert not (tmp_path / "out.txt").exists()

    def test_unknown_object_writes_nothing(self, tmp_path):
        input_path = write_input(tmp_path / "in.txt", ["A", "t1", "5", "E1-r1(A)", "E2-r1(Q)"])

        code = main(["-i", str(input_path), "-o", str(tmp_path / "out.txt"),
                     "--log-dir", str(tmp_path)])

        assert code == 3
        assert not (tmp_path / "out.txt").exists()
        assert not (tmp_path / "A.txt").exists()

    def test_aborted_run_removes_previous_outputs(self, tmp_path):
        input_path = write_input(tmp_path / "in.txt", ["A, B", "t1", "5", "E1-r1(A)", "E2-r1(Q)"])
        output_path = tmp_path / "out.txt"
        output_path.write_text("OLD-OK\n", encoding="utf-8")
        (tmp_path / "A.txt").write_text("OLD,read,0\n", encoding="utf-8")
        (tmp_path / "B.txt").write_text("OLD,write,1\n", encoding="utf-8")

        code = main(["-i", str(input_path), "-o", str(output_path),
                     "--log-dir", str(tmp_path)])

        assert code == 3
        assert not output_path.exists()
        assert not (tmp_path / "A.txt").exists()
        assert not (tmp_path / "B.txt").exists()

    def test_header_error_keeps_previous_outputs(self, tmp_path):
        input_path = write_input(tmp_path / "in.txt", ["A", "t1", "five"])
        output_path = tmp_path / "out.txt"
        output_path.write_text("OLD-OK\n", encoding="utf-8")

        assert main(["-i", str(input_path), "-o", str(output_path)]) == 2
        assert output_path.read_text(encoding="utf-8") == "OLD-OK\n"

    def test_validate_only(self, tmp_path):
        input_path = write_input(tmp_path / "in.txt", EXAMPLE_INPUT_LINES)

        code = main(["-i", str(input_path), "-o", str(tmp_path / "out.txt"), "--validate-only"])

        assert code == 0
        assert not (tmp_path / "out.txt").exists()

    def test_validate_only_reports_malformed_lines(self, tmp_path):
        input_path = write_input(tmp_path / "in.txt", ["A", "t1", "5", "E1 r1(A)"])

        assert main(["-i", str(input_path), "--validate-only"]) == 2

    def test_summary_flag(self, tmp_path, capsys):
        input_path = write_input(tmp_path / "in.txt", ["A", "t1, t2", "5, 10", "E2-w2(A) r1(A) c"])

        code = main(["-i", str(input_path), "-o", str(tmp_path / "out.txt"),
                     "--log-dir", str(tmp_path), "--summary"])

        assert code == 0
        captured = capsys.readouterr().out
        assert "E2-ROLLBACK-1" in captured
        assert "A: 1" in captured


class TestFileCollaborators:
    def test_read_input_strips_terminators(self, tmp_path):
        path = tmp_path / "in.txt"
        path.write_bytes(b"A;\r\nt1;\r\n5;\r\nE1-r1(A)\r\n")

        assert read_input(path) == ["A;", "t1;", "5;", "E1-r1(A)"]

    def test_read_missing_input(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_input(tmp_path / "absent.txt")

    def test_write_example_input(self, tmp_path):
        path = write_example_input(tmp_path / "example.txt")

        assert path.read_text(encoding="utf-8").splitlines() == list(EXAMPLE_INPUT_LINES)

    def test_clear_outputs(self, tmp_path):
        (tmp_path / "out.txt").write_text("x\n", encoding="utf-8")
        (tmp_path / "A.txt").write_text("x\n", encoding="utf-8")
        (tmp_path / "keep.txt").write_text("x\n", encoding="utf-8")

        clear_outputs(tmp_path / "out.txt", tmp_path, ["A", "B"])

        assert sorted(p.name for p in tmp_path.iterdir()) == ["keep.txt"]

    def test_object_logs_create_directory(self, tmp_path):
        log_dir = tmp_path / "logs"

        written = write_object_logs(log_dir, {"A": ["E1,read,0"], "B": []})

        assert written == [log_dir / "A.txt"]
        assert (log_dir / "A.txt").read_text(encoding="utf-8") == "E1,read,0\n"
