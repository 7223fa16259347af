"""Tests for EnvFileLoader."""

import pytest

from with_env.domain.environment import Override
from with_env.domain.exceptions import InvalidOverrideError, ParseError
from with_env.domain.files import EnvFile
from with_env.loading import EnvFileLoader, parse_overrides


@pytest.fixture
def loader(mock_logger):
    """Provide an EnvFileLoader with a mocked logger."""
    return EnvFileLoader(logger=mock_logger)


@pytest.fixture
def two_files(tmp_path, write_env):
    """Two files defining the same key, in merge order."""
    first = write_env(tmp_path / "first.env", "SHARED=first\nONLY_FIRST=1\n")
    second = write_env(tmp_path / "second.env", "SHARED=second\nONLY_SECOND=2\n")
    return [
        EnvFile(path=first, order=0),
        EnvFile(path=second, order=1),
    ]


class TestParsing:
    """dotenv syntax handling."""

    def test_comments_blank_lines_and_quotes(self, loader, tmp_path, write_env):
        """Comments and blank lines are ignored, quotes are stripped."""
        path = write_env(
            tmp_path / ".env",
            "# leading comment\n"
            "\n"
            "PLAIN=value\n"
            "DOUBLE=\"with spaces\"\n"
            "SINGLE='single quoted'\n"
            "INLINE=kept # trailing comment\n"
            "export EXPORTED=yes\n",
        )

        parsed = loader.parse_file(EnvFile(path=path))

        assert parsed == {
            "PLAIN": "value",
            "DOUBLE": "with spaces",
            "SINGLE": "single quoted",
            "INLINE": "kept",
            "EXPORTED": "yes",
        }

    def test_keeps_file_order(self, loader, tmp_path, write_env):
        """Keys come back in file order."""
        path = write_env(tmp_path / ".env", "B=2\nA=1\nC=3\n")
        assert list(loader.parse_file(EnvFile(path=path))) == ["B", "A", "C"]

    def test_references_are_not_expanded(self, loader, tmp_path, write_env):
        """Values are returned raw; expansion happens after merging."""
        path = write_env(tmp_path / ".env", "URL=http://${HOST}:$PORT\n")
        assert loader.parse_file(EnvFile(path=path))["URL"] == "http://${HOST}:$PORT"

    def test_key_without_value_is_skipped(self, loader, tmp_path, write_env):
        """A bare key without '=' does not produce a variable."""
        path = write_env(tmp_path / ".env", "BARE\nSET=1\n")
        assert loader.parse_file(EnvFile(path=path)) == {"SET": "1"}

    def test_malformed_line_raises(self, loader, tmp_path, write_env):
        """Lines the parser cannot read raise ParseError with a line number."""
        path = write_env(tmp_path / ".env", "GOOD=1\n=oops\n")

        with pytest.raises(ParseError) as exc_info:
            loader.parse_file(EnvFile(path=path))

        assert exc_info.value.path == path
        assert exc_info.value.line == 2

    def test_unreadable_file_raises(self, loader, tmp_path):
        """A file that vanished after discovery raises ParseError."""
        missing = tmp_path / "gone.env"

        with pytest.raises(ParseError) as exc_info:
            loader.load([EnvFile(path=missing)])

        assert exc_info.value.path == missing

    def test_undecodable_file_raises(self, loader, tmp_path):
        """Invalid UTF-8 is reported as ParseError."""
        path = tmp_path / ".env"
        path.write_bytes(b"A=\xff\xfe\n")

        with pytest.raises(ParseError):
            loader.load([EnvFile(path=path)])


class TestCascade:
    """Merge policy."""

    def test_cascade_last_file_wins(self, loader, two_files):
        """With cascade, the file processed last wins."""
        merged = loader.load(two_files, cascade=True)

        assert merged["SHARED"] == "second"
        assert merged["ONLY_FIRST"] == "1"
        assert merged["ONLY_SECOND"] == "2"

    def test_no_cascade_first_file_wins(self, loader, two_files):
        """Without cascade, the first value seen is kept."""
        merged = loader.load(two_files, cascade=False)

        assert merged["SHARED"] == "first"
        assert merged["ONLY_SECOND"] == "2"

    def test_no_files(self, loader):
        """No files gives an empty mapping."""
        assert dict(loader.load([])) == {}

    def test_result_is_read_only(self, loader, two_files):
        """The merged mapping cannot be mutated."""
        merged = loader.load(two_files)
        with pytest.raises(TypeError):
            merged["NEW"] = "x"  # type: ignore[index]


class TestOverrides:
    """Inline overrides."""

    @pytest.mark.parametrize("cascade", [True, False])
    def test_new_key_added_regardless_of_cascade(self, loader, two_files, cascade):
        """An override for a missing key is always applied."""
        merged = loader.load(two_files, cascade=cascade)

        result = loader.apply_overrides(merged, [Override(key="FOO", value="1")])

        assert result["FOO"] == "1"

    def test_override_replaces_file_value(self, loader, two_files):
        """Overrides win over file values."""
        merged = loader.load(two_files, cascade=False)

        result = loader.apply_overrides(merged, [Override(key="SHARED", value="cli")])

        assert result["SHARED"] == "cli"

    def test_parse_overrides(self):
        """parse_overrides validates every entry."""
        overrides = parse_overrides(["A=1", "B=two=2"])
        assert [(o.key, o.value) for o in overrides] == [("A", "1"), ("B", "two=2")]

    def test_parse_overrides_rejects_malformed(self):
        """The first malformed entry raises."""
        with pytest.raises(InvalidOverrideError):
            parse_overrides(["A=1", "nope"])
