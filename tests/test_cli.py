from pathlib import Path
from unittest.mock import patch, MagicMock

from click.testing import CliRunner

from rest_docgen.cli import main
from rest_docgen.exceptions import RenderError

FIXTURES = Path(__file__).parent / "fixtures"


class TestCliRender:
    def test_render_writes_document(self, tmp_path):
        output_dir = tmp_path / "docs"
        runner = CliRunner()
        result = runner.invoke(main, [
            "render", str(FIXTURES / "controllers.yaml"),
            "-o", str(output_dir),
            "--title", "User Service",
        ])

        assert result.exit_code == 0, result.output
        assert "Found 7 endpoints in 2 controllers." in result.output
        html = (output_dir / "index.html").read_text(encoding="utf-8")
        assert "<title>User Service</title>" in html
        assert (output_dir / "stylesheet.css").exists()

    def test_render_with_own_stylesheet(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [
            "render", str(FIXTURES / "controllers.yaml"),
            "-o", str(tmp_path),
            "--stylesheet", "theme.css",
        ])

        assert result.exit_code == 0, result.output
        assert "href='theme.css'" in (tmp_path / "index.html").read_text(encoding="utf-8")
        assert not (tmp_path / "theme.css").exists()

    def test_render_invalid_dump_fails(self, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("- not\n- a mapping\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(main, ["render", str(bad), "-o", str(tmp_path / "out")])

        assert result.exit_code == 1
        assert "Error:" in result.output

    @patch("rest_docgen.cli.SimpleHtmlWriter")
    def test_render_io_failure_is_fatal(self, MockWriter, tmp_path):
        mock_writer = MagicMock()
        mock_writer.write.side_effect = RenderError("Cannot write index.html")
        MockWriter.return_value = mock_writer

        runner = CliRunner()
        result = runner.invoke(main, ["render", str(FIXTURES / "controllers.yaml"), "-o", str(tmp_path)])

        assert result.exit_code == 1
        assert "Cannot write index.html" in result.output

    def test_render_is_deterministic(self, tmp_path):
        runner = CliRunner()
        for name in ("a", "b"):
            result = runner.invoke(main, ["render", str(FIXTURES / "controllers.yaml"), "-o", str(tmp_path / name)])
            assert result.exit_code == 0, result.output
        assert (tmp_path / "a" / "index.html").read_bytes() == (tmp_path / "b" / "index.html").read_bytes()


class TestCliList:
    def test_list_endpoints(self):
        runner = CliRunner()
        result = runner.invoke(main, ["list", str(FIXTURES / "controllers.yaml")])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "UserController"
        assert "  GET /users/{id}" in lines
        assert "  GET /status" in lines
        assert lines[-1] == "7 endpoints"

    def test_verbose_flag(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-v", "list", str(FIXTURES / "controllers.yaml")])
        assert result.exit_code == 0, result.output


class TestCliHelp:
    def test_group_help_text(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "rest-docgen: document REST controllers from source declarations." in result.output
