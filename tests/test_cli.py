"""Tests for the command line interface."""

import gzip
import logging
import tempfile
from pathlib import Path

import pytest

import cli
from exporters.context_exporter import ContextWriter


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, cli._HANDLER_TAG, False):
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


@pytest.fixture
def project():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir).resolve()
        (root / "main.ts").write_text("import { a } from './a';\n", encoding="utf-8")
        (root / "a.ts").write_text("export const a = 1; // one\n", encoding="utf-8")
        yield root


class TestArguments:
    """Tests for argument validation."""

    def test_missing_output(self, project, capsys):
        """Test a missing -o flag fails without writing anything."""
        code = cli.main([str(project / "main.ts")])

        assert code == 1
        assert "Missing output file" in capsys.readouterr().err
        assert sorted(p.name for p in project.iterdir()) == ["a.ts", "main.ts"]

    def test_missing_output_value(self, project, capsys):
        """Test -o without a value fails."""
        code = cli.main([str(project / "main.ts"), "-o"])

        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_no_inputs(self, project, capsys):
        """Test an empty input list fails before the output is created."""
        output = project / "out.txt"

        code = cli.main(["-o", str(output)])

        assert code == 1
        assert "No input files specified" in capsys.readouterr().err
        assert not output.exists()

    def test_help(self, capsys):
        """Test -h prints usage and exits 0."""
        with pytest.raises(SystemExit) as exc:
            cli.main(["-h"])

        assert exc.value.code == 0
        assert "usage: ctxbundle" in capsys.readouterr().out

    def test_version(self, capsys):
        """Test --version prints the version and exits 0."""
        with pytest.raises(SystemExit) as exc:
            cli.main(["--version"])

        assert exc.value.code == 0
        assert cli.__version__ in capsys.readouterr().out


class TestRun:
    """Tests for complete runs."""

    def test_bundle(self, project, capsys):
        """Test a successful run writes the bundle and reports it."""
        output = project / "out.txt"

        code = cli.main([str(project / "main.ts"), "-o", str(output), "-p", str(project)])

        text = output.read_text(encoding="utf-8")
        assert code == 0
        assert "// Begin main.ts\n" in text
        assert "// Begin a.ts\nexport const a = 1;\n// End a.ts\n" in text
        assert "Context successfully generated in" in capsys.readouterr().err

    def test_compress(self, project, capsys):
        """Test --compress writes a gzip artifact."""
        output = project / "out.gz"

        code = cli.main([str(project / "main.ts"), "-o", str(output), "-p", str(project), "--compress"])

        assert code == 0
        assert gzip.decompress(output.read_bytes()).decode("utf-8").startswith("// Begin main.ts\n")
        assert "generated and compressed" in capsys.readouterr().err

    def test_verbose(self, project, capsys):
        """Test verbose mode logs each file and the missing tsconfig."""
        output = project / "out.txt"

        cli.main([str(project / "main.ts"), "-o", str(output), "-p", str(project), "-v"])

        err = capsys.readouterr().err
        assert "Processing:" in err
        assert "tsconfig.json" in err

    def test_quiet_by_default(self, project, capsys):
        """Test progress lines are hidden without -v."""
        output = project / "out.txt"

        cli.main([str(project / "main.ts"), "-o", str(output), "-p", str(project)])

        assert "Processing:" not in capsys.readouterr().err

    def test_write_failure_reports_os_error(self, project, capsys, monkeypatch):
        """Test a mid-run write failure prints the underlying error."""
        output = project / "out.txt"

        def fail(self, text):
            raise OSError("No space left on device")

        monkeypatch.setattr(ContextWriter, "_append_sync", fail)

        code = cli.main([str(project / "main.ts"), "-o", str(output), "-p", str(project)])

        err = capsys.readouterr().err
        assert code == 1
        assert "Error: No space left on device" in err
        assert "TaskGroup" not in err

    def test_unwritable_output(self, project, capsys):
        """Test an output path in a missing directory fails with exit 1."""
        output = project / "missing" / "out.txt"

        code = cli.main([str(project / "main.ts"), "-o", str(output), "-p", str(project)])

        assert code == 1
        assert "Error:" in capsys.readouterr().err
