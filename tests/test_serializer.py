import tokenize
from textwrap import dedent

import libcst as cst
import pytest

from rmprint import serializer
from rmprint.errors import RenderError
from rmprint.serializer import collapse_blank_lines, render, string_interior_lines


def test_collapse_runs_to_one_blank_line():
    assert collapse_blank_lines('a = 1\n\n\n\nb = 2\n') == 'a = 1\n\nb = 2\n'


def test_single_blank_line_is_kept():
    assert collapse_blank_lines('a = 1\n\nb = 2\n') == 'a = 1\n\nb = 2\n'


def test_custom_limit():
    source = 'a = 1\n\n\n\nb = 2\n'

    assert collapse_blank_lines(source, 2) == 'a = 1\n\n\nb = 2\n'
    assert collapse_blank_lines(source, 0) == 'a = 1\nb = 2\n'


def test_whitespace_only_lines_count_as_blank():
    assert collapse_blank_lines('a = 1\n    \n\t\n\nb = 2\n') == 'a = 1\n    \nb = 2\n'


def test_blank_lines_inside_strings_are_preserved():
    source = 'x = """first\n\n\n\nlast"""\n\n\n\ny = 1\n'

    assert collapse_blank_lines(source) == 'x = """first\n\n\n\nlast"""\n\ny = 1\n'


def test_string_interior_lines():
    source = 'a = 1\ns = """\n\n"""\nb = 2\n'

    assert string_interior_lines(source) == {3, 4}


def test_crlf_line_endings():
    assert collapse_blank_lines('a = 1\r\n\r\n\r\nb = 2\r\n') == 'a = 1\r\n\r\nb = 2\r\n'


def test_render_is_deterministic_and_normalized():
    module = cst.parse_module(dedent('''\
        import os


        def f():
            return os.sep
    '''))

    first = render(module)
    second = render(module)

    assert first == second
    assert first == 'import os\n\ndef f():\n    return os.sep\n'


def test_render_respects_limit():
    module = cst.parse_module('import os\n\n\ndef f():\n    pass\n')

    assert render(module, max_blank_lines=2) == 'import os\n\n\ndef f():\n    pass\n'


def test_render_error_on_tokenize_failure(monkeypatch):
    module = cst.parse_module('x = 1\n')

    def broken(text, max_blank_lines):
        raise tokenize.TokenError('EOF in multi-line statement', (1, 0))

    monkeypatch.setattr(serializer, 'collapse_blank_lines', broken)

    with pytest.raises(RenderError) as excinfo:
        render(module, path='demo.py')

    assert excinfo.value.path == 'demo.py'
    assert 'demo.py' in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, tokenize.TokenError)
