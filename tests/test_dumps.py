import io
import json

import numpy as np

from fn_util.strings.dumps import json_str, write_json


class _User:
    def __init__(self):
        self.name = 'José'
        self.scores = np.array([1, 2])
        self.best = np.float64(2.5)


def test_json_str_is_indented():
    assert json_str({'a': [1]}) == '{\n  "a": [\n    1\n  ]\n}'


def test_json_str_keeps_non_ascii():
    assert json_str('ñ <>&') == '"ñ <>&"'


def test_json_str_projects_objects():
    assert json.loads(json_str(_User())) == {'name': 'José', 'scores': [1, 2], 'best': 2.5}


def test_json_str_sets():
    assert json.loads(json_str({'s': {3}})) == {'s': [3]}


def test_write_json(capsys):
    write_json([1])
    assert capsys.readouterr().out == '[\n  1\n]\n'


def test_write_json_to_stream():
    buf = io.StringIO()
    write_json({'k': 'v'}, file=buf)
    assert json.loads(buf.getvalue()) == {'k': 'v'}
