import pytest
import yaml

from betterls.utils.style import COLORS, RESET, TableStyle, colorize, colors_disabled


def test_colorize():
    assert colorize('x', 'red') == '\033[31mx\033[0m'
    assert colorize('x', 'bright_cyan') == '\033[96mx\033[0m'
    assert colorize('x', 'red', enabled=False) == 'x'


def test_colorize_unknown_color():
    with pytest.raises(ValueError):
        colorize('x', 'mauve')


def test_colors_table():
    assert len(COLORS) == 16
    assert RESET == '\033[0m'


def test_colors_disabled(monkeypatch):
    assert not colors_disabled()
    monkeypatch.setenv('NO_COLOR', '1')
    assert colors_disabled()


def test_style_rejects_unknown_color():
    with pytest.raises(ValueError, match="'size'"):
        TableStyle(size='mauve')


def test_from_yaml(tmp_path):
    path = tmp_path / 'style.yaml'
    path.write_text(yaml.safe_dump({'header': 'red', 'color': False}))
    style = TableStyle.from_yaml(str(path))
    assert style == TableStyle(header='red', color=False)


def test_from_yaml_empty_file_uses_defaults(tmp_path):
    path = tmp_path / 'style.yaml'
    path.write_text('')
    assert TableStyle.from_yaml(str(path)) == TableStyle()


def test_from_yaml_unknown_field(tmp_path):
    path = tmp_path / 'style.yaml'
    path.write_text('border: red\n')
    with pytest.raises(ValueError, match='border'):
        TableStyle.from_yaml(str(path))


def test_from_yaml_not_a_mapping(tmp_path):
    path = tmp_path / 'style.yaml'
    path.write_text('- red\n')
    with pytest.raises(ValueError):
        TableStyle.from_yaml(str(path))


def test_style_rejects_non_bool_color():
    with pytest.raises(ValueError, match="'color'"):
        TableStyle(color='false')


def test_from_yaml_quoted_color_flag(tmp_path):
    path = tmp_path / 'style.yaml'
    path.write_text("color: 'false'\n")
    with pytest.raises(ValueError):
        TableStyle.from_yaml(str(path))


def test_from_yaml_list_color(tmp_path):
    path = tmp_path / 'style.yaml'
    path.write_text('header: [red, blue]\n')
    with pytest.raises(ValueError, match="'header'"):
        TableStyle.from_yaml(str(path))
