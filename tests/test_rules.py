import libcst as cst
import pytest

from rmprint.rules import DEFAULT_RULES, MatchRule, RuleSet, dotted_name, is_debug_call


@pytest.mark.parametrize('code', [
    'print("debug")',
    'print()',
    'print("debug", x, y, sep=", ")',
    'logging.debug("value %s", x)',
    'pprint.pprint(data)',
    'pprint.pp(data)',
    'pprint.pformat(data)',
    '(print)("parenthesized callee")',
])
def test_debug_calls_match(code):
    assert is_debug_call(cst.parse_expression(code))


@pytest.mark.parametrize('code', [
    'some_func("not print")',
    'printf("close but not exact")',
    'Print("case matters")',
    'pprint.pprint2(data)',
    'logging.info("kept")',
    'logger.debug("different qualifier")',
    'pp.pprint(data)',
    'obj.print("method named print")',
    'get_printer().pprint(data)',
    'print',
    '"print(x)"',
])
def test_other_expressions_do_not_match(code):
    assert not is_debug_call(cst.parse_expression(code))


def test_dotted_qualifier_matches_literal_text():
    rules = RuleSet.from_texts(['sys.stdout.write'])

    assert is_debug_call(cst.parse_expression('sys.stdout.write("x")'), rules)
    assert not is_debug_call(cst.parse_expression('stdout.write("x")'), rules)
    assert not is_debug_call(cst.parse_expression('print("x")'), rules)


def test_custom_bare_rule():
    rules = RuleSet.from_texts(['ic'])

    assert is_debug_call(cst.parse_expression('ic(x)'), rules)
    assert not is_debug_call(cst.parse_expression('print(x)'), rules)


def test_match_rule_parse():
    assert MatchRule.parse('print') == MatchRule(None, 'print')
    assert MatchRule.parse('pprint.pprint') == MatchRule('pprint', 'pprint')
    assert MatchRule.parse('sys.stdout.write') == MatchRule('sys.stdout', 'write')
    assert MatchRule.parse(' logging.debug ') == MatchRule('logging', 'debug')


@pytest.mark.parametrize('text', ['', 'foo..bar', 'foo.', '1abc', 'print()', 'a b'])
def test_match_rule_parse_rejects_invalid(text):
    with pytest.raises(ValueError):
        MatchRule.parse(text)


def test_match_rule_parse_rejects_non_string():
    with pytest.raises(ValueError):
        MatchRule.parse(42)


def test_comment_markers_render_from_rules():
    assert 'print(' in DEFAULT_RULES.comment_markers
    assert 'pprint.pformat(' in DEFAULT_RULES.comment_markers
    assert 'logging.debug(' in DEFAULT_RULES.comment_markers


def test_comment_markers_override():
    rules = RuleSet.from_texts(['print'], comment_markers=['DEBUG'])

    assert rules.matches_comment('# DEBUG only')
    assert not rules.matches_comment('# print(x)')


def test_duplicate_rules_collapse():
    rules = RuleSet.from_texts(['print', 'print', 'pprint.pprint'])

    assert len(rules.rules) == 2
    assert rules.comment_markers == ('print(', 'pprint.pprint(')


def test_dotted_name():
    assert dotted_name(cst.parse_expression('a')) == 'a'
    assert dotted_name(cst.parse_expression('a.b.c')) == 'a.b.c'
    assert dotted_name(cst.parse_expression('a().b')) is None
    assert dotted_name(cst.parse_expression('a[0].b')) is None
