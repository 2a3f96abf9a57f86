from fn_util.cfg import Config, PaddingConfig, JsonConfig
from fn_util.design_patterns import Singleton


def test_defaults():
    assert Config.padding.TOTAL_LENGTH == 50
    assert Config.padding.CHAR == ' '
    assert Config.json.INDENT == 2
    assert Config.json.ENSURE_ASCII is False


def test_override_via_kwargs():
    p = PaddingConfig(TOTAL_LENGTH=10)
    assert p.TOTAL_LENGTH == 10
    assert p.as_dict() == {'TOTAL_LENGTH': 10, 'CHAR': ' '}


def test_nested_as_dict():
    d = Config.as_dict()
    assert d['json'] == {'INDENT': 2, 'ENSURE_ASCII': False}
    assert set(d) == {'padding', 'json', 'log', 'PRETTY_TRACEBACKS'}


def test_assimilate_routes_names_to_children():
    class Outer(Singleton):
        VERBOSE = 0
        json: Singleton = JsonConfig()

    cfg = Outer.assimilate({'VERBOSE': 2, 'INDENT': 4, 'UNKNOWN': 1})
    assert cfg.VERBOSE == 2
    assert cfg.json.INDENT == 4
    assert cfg.json.ENSURE_ASCII is False


def test_str_lists_members():
    s = str(JsonConfig(INDENT=8))
    assert s.startswith('JsonConfig:')
    assert 'INDENT : 8' in s
