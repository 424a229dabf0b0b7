import logging

import pytest

from ini_parser import ParseOptions, parse, parse_tree
from ini_parser.core.models import SectionEntry


class TestFixtures:
    def test_valid_simple(self, read_fixture):
        assert parse(read_fixture("valid-simple.ini")) == {
            "app": {"name": ["TestApp"], "version": ["1.0"]},
            "database": {"host": ["localhost"], "port": ["3306"]},
            "settings": {"debug": ["false"]},
        }

    def test_valid_simple_meta(self, read_fixture):
        result = parse(read_fixture("valid-simple.ini"), {"meta": True})
        assert result["app"] == {
            "type": "section",
            "content": {
                "name": {"type": "configuration", "content": ["TestApp"]},
                "version": {"type": "configuration", "content": ["1.0"]},
            },
        }
        assert result["settings"]["content"]["debug"]["content"] == ["false"]

    def test_multiline(self, read_fixture):
        assert parse(read_fixture("valid-multiline.ini")) == {
            "pytest": {
                "pythonpath": [".", "src", "tests"],
                "addopts": [
                    "-rA",
                    "--no-header",
                    "--cov=package",
                    "--cov-config=.coveragerc",
                    "--cov-context=test",
                    "--cov-report=term",
                    "--junit-xml=coverage/junit.xml",
                ],
                "testpaths": ["tests", "integration"],
            },
            "deployment": {
                "servers": ["prod1", "prod2", "prod3", "staging1"],
                "connection_params": ["timeout=30", "retry=3", "pool_size=10"],
            },
        }

    def test_global_keys(self, read_fixture):
        assert parse(read_fixture("valid-global-keys.ini")) == {
            "app_name": ["GlobalKeysTest"],
            "version": ["2.5.1"],
            "author": ["Test", "Author"],
            "debug": ["true"],
            "log_level": ["info"],
            "root_dir": ["/var/app"],
            "data_dir": ["/var/app/data"],
            "allowed_hosts": ["localhost", "127.0.0.1", "example.com"],
        }

    def test_global_keys_meta(self, read_fixture):
        result = parse(read_fixture("valid-global-keys.ini"), meta=True)
        assert result["app_name"] == {"type": "configuration", "content": ["GlobalKeysTest"]}
        assert result["author"] == {"type": "configuration", "content": ["Test", "Author"]}

    def test_complete(self, read_fixture):
        result = parse(read_fixture("valid-complete.ini"))

        assert list(result) == ["app_name", "version", "debug", "database", "server", "features", "logging", "cache"]
        assert result["database"]["port"] == ["5432"]
        assert result["server"]["enabled"] == ["true"]
        assert result["features"]["modules"] == ["auth", "logging", "api", "database"]
        assert result["features"]["tags"] == ["production", "stable", "v1.0"]
        assert result["logging"] == {"level": ["info"], "format": ["json"], "output": ["stdout"]}
        assert result["cache"] == {"enabled": ["false"]}

        dumped = repr(result)
        assert "Global configuration" not in dumped
        assert "PostgreSQL" not in dumped
        assert "comment" not in dumped

    def test_properties_values_split_on_spaces(self, read_fixture):
        result = parse(read_fixture("valid-simple.properties"))
        assert result["sonar.projectName"] == ["Test", "Project"]
        assert result["sonar.coverage.exclusions"] == ["**/*.test.js,**/node_modules/**"]

    def test_config_extension(self, read_fixture):
        assert parse(read_fixture("valid-simple.config")) == {
            "app_name": ["test-application"],
            "environment": ["development"],
            "debug": ["true"],
            "port": ["3000"],
            "host": ["0.0.0.0"],
        }

    def test_edge_cases(self, read_fixture):
        result = parse(read_fixture("edge-cases.ini"))

        assert result["empty_section"] == {}
        assert result["comments_only"] == {}
        assert result["special_chars"] == {
            "path": ["C:\\Program", "Files\\App"],
            "url": ["https://example.com/path?param=value"],
            "equation": ["x=y+z"],
        }
        assert result["unindented_values"]["key_no_initial_value"] == ["value1", "value2", "value3"]
        assert result["single_key"] == {"lonely": ["value"]}
        assert result["empty_values"] == {"key_with_no_value": [], "another_empty": []}
        assert result["mixed"] == {
            "first": ["initial"],
            "second": ["indented1", "indented2"],
            "third": ["another"],
        }
        assert result["multiline_with_equals"]["params"] == ["first", "key_like=value_like", "another=one"]
        assert result["first"] == {"key": ["value1"]}
        assert result["second"] == {"key": ["value2"]}

    def test_empty_file(self, read_fixture):
        assert parse(read_fixture("empty.ini")) == {}


@pytest.mark.parametrize("content", [None, 12345, 1.5, {"key": "value"}, ["item1", "item2"], b"k=v", ""])
def test_non_text_input_yields_empty_tree(content):
    assert parse(content) == {}
    assert parse(content, meta=True) == {}


def test_absent_input_yields_empty_tree():
    assert parse() == {}


@pytest.mark.parametrize(
    "content, expected",
    [
        ("global_key=\n    value1\n    value2", {"global_key": ["value1", "value2"]}),
        ("global_key=\nvalue1\nvalue2", {"global_key": ["value1", "value2"]}),
        ("global_key=initial\n    value1\n    value2", {"global_key": ["initial", "value1", "value2"]}),
        ("invalid_line_no_equals\nvalid_key=value", {"valid_key": ["value"]}),
        ("# This is a comment\n; Another comment\n# Yet another", {}),
        ("\n\n\n   \n\t\n", {}),
        ("     \t\t   \n   ", {}),
        ("key=value # this is a comment", {"key": ["value"]}),
        ("key=value ; this is also a comment", {"key": ["value"]}),
        ("connection_string=server=localhost;database=test", {"connection_string": ["server=localhost"]}),
        ("tags=production stable v1.0", {"tags": ["production", "stable", "v1.0"]}),
        ("params=timeout=30 retry=3", {"params": ["timeout=30", "retry=3"]}),
        ("[section]\nkey=value1\n    value2\n    value3", {"section": {"key": ["value1", "value2", "value3"]}}),
        ("[section]\ninvalid_line_without_equals\nkey=value", {"section": {"key": ["value"]}}),
    ],
)
def test_edge_case_content(content, expected):
    assert parse(content) == expected


def test_values_keep_source_order_across_continuation_styles():
    content = "[s]\nk=a b\n    c\n[t]\nk=\nd\ne f\n[s]\nk=g"
    assert parse(content) == {"s": {"k": ["a", "b", "c", "g"]}, "t": {"k": ["d", "e", "f"]}}


def test_reopened_section_merges():
    assert parse("[a]\nk=1\n[a]\nk2=2") == {"a": {"k": ["1"], "k2": ["2"]}}


def test_no_return_to_global_scope():
    assert parse("g=1\n[s]\nk=2\ng=3") == {"g": ["1"], "s": {"k": ["2"], "g": ["3"]}}


def test_unindented_line_after_value_is_dropped():
    assert parse("[s]\nk=v\nstray\nk2=w") == {"s": {"k": ["v"], "k2": ["w"]}}


def test_indented_line_continues_after_unindented_run_ends():
    assert parse("k=\nv1\n    v2\nv3") == {"k": ["v1", "v2"]}


def test_crlf_input():
    assert parse("[s]\r\nk=v\r\n    w\r\n") == {"s": {"k": ["v", "w"]}}


def test_global_key_then_section_with_same_name_last_wins():
    assert parse("x=1\n[x]\nk=v") == {"x": {"k": ["v"]}}


def test_empty_section_name():
    assert parse("[]\nk=v") == {"": {"k": ["v"]}}


def test_empty_key_name_is_stored_but_not_continued():
    assert parse("=value\n    more") == {"": ["value"]}


def test_options_forms():
    content = "[s]\nk=v"
    meta = {"s": {"type": "section", "content": {"k": {"type": "configuration", "content": ["v"]}}}}

    assert parse(content, ParseOptions(meta=True)) == meta
    assert parse(content, {"meta": True}) == meta
    assert parse(content, meta=True) == meta
    assert parse(content, {"meta": False}) == {"s": {"k": ["v"]}}
    assert parse(content, {"meta": "yes"}) == {"s": {"k": ["v"]}}
    assert parse(content, {}) == {"s": {"k": ["v"]}}


def test_calls_do_not_share_state():
    first = parse("[a]\nk=1")
    second = parse("[a]\nk=2")
    assert first == {"a": {"k": ["1"]}}
    assert second == {"a": {"k": ["2"]}}


def test_parse_tree_returns_models():
    tree = parse_tree("g=1\n[s]\nk=v")
    assert tree["g"].kind == "configuration"
    assert tree["g"].values == ["1"]
    assert isinstance(tree["s"], SectionEntry)
    assert tree["s"].keys["k"].values == ["v"]


def test_leading_bom_is_ignored():
    assert parse("\ufeff[app]\nname=demo") == {"app": {"name": ["demo"]}}
    assert parse("\ufeffkey=value") == {"key": ["value"]}
    assert parse("\ufeff") == {}


def test_unit_separator_is_part_of_the_value():
    assert parse("k=a\x1cb") == {"k": ["a\x1cb"]}


def test_skipped_lines_are_logged_without_line_numbers(caplog):
    with caplog.at_level(logging.DEBUG, logger="ini_parser"):
        assert parse("[s]\nstray\nk=v") == {"s": {"k": ["v"]}}

    assert "skipped malformed line: 'stray'" in caplog.text
    assert "line 2" not in caplog.text
