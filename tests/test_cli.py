import json

import pytest
import yaml

from site_config.cli import build_parser, main
from tests.factories.config_factories import make_invalid_config, temp_config_file

pytestmark = pytest.mark.usefixtures("restore_root_logging")


def test_check_valid_file(url_contacts_path, capsys):
    assert main(["check", url_contacts_path]) == 0

    out = capsys.readouterr().out
    assert "Blog by John Doe" in out
    assert "Articles, About me" in out
    assert "https://lumen.netlify.com/" in out


def test_check_uses_env_path(monkeypatch, handle_contacts_path, capsys):
    monkeypatch.setenv("SITE_CONFIG_PATH", handle_contacts_path)

    assert main(["check"]) == 0
    assert handle_contacts_path in capsys.readouterr().out


def test_check_invalid_file_lists_errors(capsys):
    with temp_config_file(make_invalid_config("zero_posts_per_page")) as path:
        assert main(["check", path]) == 1

    err = capsys.readouterr().err
    assert "Invalid site configuration" in err
    assert "postsPerPage" in err


def test_check_missing_file(capsys):
    assert main(["check", "/nonexistent/site.yaml"]) == 1
    assert "not found" in capsys.readouterr().err


def test_check_unreadable_path(tmp_path, capsys):
    directory = tmp_path / "site.yaml"
    directory.mkdir()

    assert main(["check", str(directory)]) == 1
    assert "Cannot read configuration" in capsys.readouterr().err


def test_diff_unreadable_path(url_contacts_path, tmp_path):
    directory = tmp_path / "site.yaml"
    directory.mkdir()

    assert main(["diff", url_contacts_path, str(directory)]) == 2


@pytest.mark.parametrize("fmt", ["yaml", "json"])
def test_dump_prints_normalised_record(url_contacts_path, fmt, capsys):
    assert main(["dump", url_contacts_path, "--format", fmt]) == 0

    out = capsys.readouterr().out
    data = json.loads(out) if fmt == "json" else yaml.safe_load(out)
    assert data["title"] == "Blog by John Doe"
    assert data["author"]["contacts"]["rss"] == ""


def test_schema_prints_json_schema(capsys):
    assert main(["schema"]) == 0

    schema = json.loads(capsys.readouterr().out)
    assert schema["title"] == "Site Configuration"


def test_links_resolves_handles(handle_contacts_path, capsys):
    assert main(["links", handle_contacts_path]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert "twitter: https://www.twitter.com/kjmesc" in lines
    assert lines[0] == "email: mailto:kevinccbsg@gmail.com"


def test_diff_reports_conflicts(url_contacts_path, handle_contacts_path, capsys):
    assert main(["diff", url_contacts_path, handle_contacts_path]) == 1

    out = capsys.readouterr().out
    assert "6 field(s) differ" in out
    assert "author.contacts.twitter: 'https://twitter.com/kjmesc' != 'kjmesc'" in out


def test_diff_identical_files(url_contacts_path, capsys):
    assert main(["diff", url_contacts_path, url_contacts_path]) == 0
    assert "No differences" in capsys.readouterr().out


def test_diff_invalid_file(url_contacts_path):
    assert main(["diff", url_contacts_path, "/nonexistent/site.yaml"]) == 2


def test_command_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
