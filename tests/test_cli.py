import base64

import pytest
from typer.testing import CliRunner

from cli.main import app, image_file_to_data_uri
from cli.ui_components import html_itinerary_to_markdown
from core.domain.errors import InvalidInputError

runner = CliRunner()


def test_image_file_to_data_uri(tmp_path):
    path = tmp_path / "tower.png"
    path.write_bytes(b"\x89PNG\r\n")
    uri = image_file_to_data_uri(path)
    assert uri == "data:image/png;base64," + base64.b64encode(b"\x89PNG\r\n").decode()


def test_image_file_with_unknown_type(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello")
    with pytest.raises(InvalidInputError):
        image_file_to_data_uri(path)


def test_html_itinerary_to_markdown():
    assert html_itinerary_to_markdown("<b>Day 1</b><br><br>Louvre") == "**Day 1**\n\nLouvre"


def test_category_out_of_range_exits_without_network():
    result = runner.invoke(app, ["--quiet", "category", "Rome", "42"])
    assert result.exit_code == 2


def test_unknown_itinerary_format():
    result = runner.invoke(app, ["--quiet", "itinerary", "Paris", "3", "--format", "pdf"])
    assert result.exit_code == 1
