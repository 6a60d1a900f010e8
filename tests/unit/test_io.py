"""Unit tests for the file collaborators and export record format."""

import pytest
from anagram_index.core.io import (
    format_record,
    parse_record,
    read_export,
    read_words,
    write_lines,
)
from anagram_index.errors import ExportFormatError, IndexReadError, IndexWriteError


class TestRecordFormat:
    """Test cases for formatting and parsing export records."""
    
    def test_format_record(self):
        """Test a record joins words with pipes after the key."""
        assert format_record("efil", ["file", "life"]) == "efil:file|life"
    
    def test_format_record_no_trailing_pipe(self):
        """Test there is no separator after the last word."""
        assert not format_record("loop", ["loop", "polo", "pool"]).endswith("|")
    
    def test_parse_record(self):
        """Test parsing a record into key and word set."""
        key, words = parse_record("loop:pool|loop|polo")
        assert key == "loop"
        assert words == {"loop", "polo", "pool"}
    
    def test_parse_record_splits_on_first_colon(self):
        """Test only the first colon separates the key."""
        key, words = parse_record("::a|a:")
        assert key == ""
        assert words == {":a", "a:"}
    
    def test_parse_record_empty_key(self):
        """Test a group of empty-string keyed words."""
        key, words = parse_record(":|")
        assert key == ""
        assert words == {""}
    
    def test_parse_record_missing_separator(self):
        """Test a line without a key separator."""
        with pytest.raises(ExportFormatError):
            parse_record("efil file life")


class TestFileCollaborators:
    """Test cases for reading and writing files."""
    
    def test_read_words_strips_terminators_only(self, tmp_path):
        """Test lines keep inner and leading whitespace."""
        path = tmp_path / "words.txt"
        path.write_bytes(b" file\r\nlife \n\nnone")
        assert read_words(str(path)) == [" file", "life ", "", "none"]
    
    def test_read_words_missing(self, tmp_path):
        """Test reading a missing file."""
        with pytest.raises(IndexReadError) as exc_info:
            read_words(str(tmp_path / "missing.txt"))
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
    
    def test_write_lines(self, tmp_path):
        """Test each line is terminated with a newline."""
        path = tmp_path / "out.txt"
        count = write_lines(str(path), ["efil:file|life", "loop:loop|pool"])
        assert count == 2
        assert path.read_text(encoding="utf-8") == "efil:file|life\nloop:loop|pool\n"
    
    def test_write_lines_unicode(self, tmp_path):
        """Test non-ASCII words are written as UTF-8."""
        path = tmp_path / "out.txt"
        write_lines(str(path), ["aé:éa|aé"])
        assert path.read_bytes() == "aé:éa|aé\n".encode("utf-8")
    
    def test_write_lines_unencodable(self, tmp_path):
        """Test a word the encoding cannot represent."""
        with pytest.raises(IndexWriteError):
            write_lines(str(tmp_path / "out.txt"), ["aé:éa|aé"], encoding="ascii")
    
    def test_read_export_skips_blank_lines(self, tmp_path):
        """Test blank lines between records are ignored."""
        path = tmp_path / "anagrams.txt"
        path.write_text("efil:file|life\n\nloop:loop|pool\n", encoding="utf-8")
        assert read_export(str(path)) == [
            ("efil", {"file", "life"}),
            ("loop", {"loop", "pool"}),
        ]
    
    def test_read_export_reports_line_number(self, tmp_path):
        """Test malformed records report where they were found."""
        path = tmp_path / "anagrams.txt"
        path.write_text("efil:file|life\n\ngarbage\n", encoding="utf-8")
        with pytest.raises(ExportFormatError) as exc_info:
            read_export(str(path))
        assert exc_info.value.line_number == 3
        assert exc_info.value.line == "garbage"
