import pytest

from minirdbms.parser import CommandType, ParsedCommand, parse_full_command


@pytest.mark.parametrize(
    "text, expected_type, expected_args",
    [
        ("PUT key1 value1", CommandType.PUT, ["key1", "value1"]),
        ("GET key1", CommandType.GET, ["key1"]),
        ("REMOVE key1", CommandType.REMOVE, ["key1"]),
        ("SHOW", CommandType.SHOW, []),
        ("FLUSH", CommandType.FLUSH, []),
        ("EXIT", CommandType.EXIT, []),
        ("CREATE_DATABASE mydb", CommandType.CREATE_DATABASE, ["mydb"]),
        ("ALTER_DATABASE prod", CommandType.ALTER_DATABASE, ["prod"]),
        ("JOIN table1 table2", CommandType.JOIN, ["table1", "table2"]),
        ("GROUP_BY age", CommandType.GROUP_BY, ["age"]),
        ("ORDER name", CommandType.ORDER, ["name"]),
        ("MATCH abc*", CommandType.MATCH, ["abc*"]),
        ("LIMIT 5", CommandType.LIMIT, ["5"]),
        ("DISTINCT", CommandType.DISTINCT, []),
        ("CREATE_INDEX name", CommandType.CREATE_INDEX, ["name"]),
        (
            "UPDATE users name Bob name Alice =",
            CommandType.UPDATE,
            ["users", "name", "Bob", "name", "Alice", "="],
        ),
        ("FOOBAR something", CommandType.INVALID, ["something"]),
    ],
)
def test_parse(text, expected_type, expected_args):
    assert parse_full_command(text) == ParsedCommand(expected_type, expected_args)


def test_case_insensitive_command():
    result = parse_full_command("put Key Value")
    assert result.type is CommandType.PUT
    assert result.args == ["Key", "Value"]


def test_extra_whitespace():
    result = parse_full_command("  get\t a   b  ")
    assert result.type is CommandType.GET
    assert result.args == ["a", "b"]


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_empty_input_is_invalid(text):
    assert parse_full_command(text) == ParsedCommand(CommandType.INVALID, [])