"""Tests for the record scanner."""

import pytest

from csvrecord.core.parser import (
    Dialect,
    RecordParseError,
    TrailingEscapeError,
    UnexpectedQuoteError,
    UnterminatedQuotedFieldError,
    new_dialect,
    parse,
    parse_record,
)


class TestUnquoted:
    """Tests for plain unquoted fields."""

    def test_simple_fields(self, csv_dialect: Dialect) -> None:
        """Test splitting simple comma-separated fields."""
        assert parse(csv_dialect, "a,b,c") == ["a", "b", "c"]

    def test_empty_record(self, csv_dialect: Dialect) -> None:
        """An empty record has zero fields, not one empty field."""
        assert parse(csv_dialect, "") == []

    def test_empty_middle_field(self, csv_dialect: Dialect) -> None:
        """Test empty field between separators."""
        assert parse(csv_dialect, "a,,c") == ["a", "", "c"]

    def test_trailing_separator(self, csv_dialect: Dialect) -> None:
        """A trailing separator produces a final empty field."""
        assert parse(csv_dialect, "a,") == ["a", ""]

    def test_only_separator(self, csv_dialect: Dialect) -> None:
        """Test record consisting of a single separator."""
        assert parse(csv_dialect, ",") == ["", ""]

    def test_single_field(self, csv_dialect: Dialect) -> None:
        """Test record without any separator."""
        assert parse(csv_dialect, "abc") == ["abc"]

    def test_whitespace_kept_without_trim(self, csv_dialect: Dialect) -> None:
        """Test whitespace is preserved when trimming is off."""
        assert parse(csv_dialect, " a , b ") == [" a ", " b "]

    def test_default_dialect_is_csv(self) -> None:
        """parse_record without dialect uses RFC CSV."""
        assert parse_record('"a,b",c') == ["a,b", "c"]


class TestQuotedRfc:
    """Tests for quoted fields in RFC mode."""

    def test_separator_in_quotes(self, csv_dialect: Dialect) -> None:
        """Separators inside quotes are data."""
        assert parse(csv_dialect, '"a,b",c') == ["a,b", "c"]

    def test_doubled_quote(self, csv_dialect: Dialect) -> None:
        """A doubled quote collapses to one literal quote."""
        assert parse(csv_dialect, '"a""b",c') == ['a"b', "c"]

    def test_quoted_empty(self, csv_dialect: Dialect) -> None:
        """Test explicitly quoted empty field."""
        assert parse(csv_dialect, '""') == [""]

    def test_quoted_empty_fields(self, csv_dialect: Dialect) -> None:
        """Test several quoted empty fields."""
        assert parse(csv_dialect, '"","",""') == ["", "", ""]

    def test_doubled_quotes_at_edges(self, csv_dialect: Dialect) -> None:
        """Test quotes at the start and end of quoted content."""
        assert parse(csv_dialect, '"""quoted"""') == ['"quoted"']

    def test_embedded_newline(self, csv_dialect: Dialect) -> None:
        """A reconstructed record may contain line breaks inside quotes."""
        assert parse(csv_dialect, '"line1\nline2",b') == ["line1\nline2", "b"]

    def test_text_after_closing_quote_reopens(self, csv_dialect: Dialect) -> None:
        """Text after a quote inside a quoted field keeps the field open."""
        with pytest.raises(UnterminatedQuotedFieldError) as exc_info:
            parse(csv_dialect, '"abc"x,')
        assert exc_info.value.offset == 7

    def test_text_after_quote_then_close(self, csv_dialect: Dialect) -> None:
        """The deferred quote becomes data when followed by ordinary text."""
        assert parse(csv_dialect, '"ab"c"') == ['ab"c']


class TestSingleQuoteMode:
    """Tests for the lenient single-quote discipline."""

    def test_internal_quotes(self, single_quote_dialect: Dialect) -> None:
        """Unescaped internal quotes are data."""
        assert parse(single_quote_dialect, '"My name is "John"",x') == ['My name is "John"', "x"]

    def test_plain_quoted(self, single_quote_dialect: Dialect) -> None:
        """Test ordinary quoted field."""
        assert parse(single_quote_dialect, '"a,b",c') == ["a,b", "c"]

    def test_doubled_quote_kept_pending(self, single_quote_dialect: Dialect) -> None:
        """In single-quote mode a run of quotes keeps only the last one pending."""
        assert parse(single_quote_dialect, '"a""b"') == ['a""b']

    def test_closing_quote_at_end(self, single_quote_dialect: Dialect) -> None:
        """Test quoted field closed by end of record."""
        assert parse(single_quote_dialect, '"x"') == ["x"]

    def test_rfc_differs(self, csv_dialect: Dialect, single_quote_dialect: Dialect) -> None:
        """The same input resolves differently in the two modes."""
        assert parse(csv_dialect, '"a""b"') == ['a"b']
        assert parse(single_quote_dialect, '"a""b"') == ['a""b']


class TestEscape:
    """Tests for escape handling."""

    def test_escaped_separator(self, escape_dialect: Dialect) -> None:
        """An escaped separator is data."""
        assert parse(escape_dialect, "a\\,b,c") == ["a,b", "c"]

    def test_escaped_quote_in_unquoted(self, escape_dialect: Dialect) -> None:
        """An escaped quote inside an unquoted field is data."""
        assert parse(escape_dialect, 'a\\"b') == ['a"b']

    def test_escaped_quote_at_field_start(self, escape_dialect: Dialect) -> None:
        """An escaped quote at field start does not open quoting."""
        assert parse(escape_dialect, '\\"a,b') == ['"a', "b"]

    def test_escape_inside_quotes(self, escape_dialect: Dialect) -> None:
        """Test escaping inside a quoted field."""
        assert parse(escape_dialect, '"a\\"b",c') == ['a"b', "c"]

    def test_escaped_escape(self, escape_dialect: Dialect) -> None:
        """Test a literal escape character."""
        assert parse(escape_dialect, "a\\\\b") == ["a\\b"]

    def test_trailing_escape(self, escape_dialect: Dialect) -> None:
        """A dangling escape at the end of the record is malformed."""
        with pytest.raises(TrailingEscapeError) as exc_info:
            parse(escape_dialect, "abc\\")
        assert exc_info.value.offset == 4

    def test_separator_wins_over_escape(self) -> None:
        """When separator and escape coincide, the separator rule applies."""
        dialect = new_dialect(",", '"', ",", "", False, False)
        assert parse(dialect, "a,b") == ["a", "b"]

    def test_escape_wins_over_quote(self) -> None:
        """When quote and escape coincide, the escape rule applies."""
        dialect = new_dialect(",", '"', '"', "", False, False)
        assert parse(dialect, 'a""b,c') == ['a"b', "c"]


class TestTrimAndEmptyValue:
    """Tests for trimming and the empty-value substitute."""

    def test_trim(self) -> None:
        """Test trimming leading and trailing whitespace."""
        dialect = new_dialect(",", '"', None, "", True, False)
        assert parse(dialect, " a , b ") == ["a", "b"]

    def test_trim_control_chars(self) -> None:
        """Characters up to 0x20 are trimmed, including tabs and control chars."""
        dialect = new_dialect(",", '"', None, "", True, False)
        assert parse(dialect, "\t\x01a b\r\n") == ["a b"]

    def test_trim_all_whitespace(self) -> None:
        """A whitespace-only field trims to the empty string, not the empty value."""
        dialect = new_dialect(",", '"', None, "<NULL>", True, False)
        assert parse(dialect, "  ,x") == ["", "x"]

    def test_trim_quoted(self) -> None:
        """Trimming applies to quoted content as well."""
        dialect = new_dialect(",", '"', None, "", True, False)
        assert parse(dialect, '" a ",b') == ["a", "b"]

    def test_null_for_absent_fields(self, null_dialect: Dialect) -> None:
        """The empty value appears only for zero-length unquoted fields."""
        assert parse(null_dialect, 'a,,"",') == ["a", "<NULL>", "", "<NULL>"]

    def test_quoted_empty_is_not_null(self, null_dialect: Dialect) -> None:
        """Test quoted empty field alone."""
        assert parse(null_dialect, '""') == [""]

    def test_none_empty_value(self) -> None:
        """empty_value=None returns None for absent fields."""
        dialect = new_dialect(",", '"', None, None, False, False)
        assert parse(dialect, ',""') == [None, ""]


class TestTsv:
    """Tests for the TSV preset."""

    def test_tabs(self, tsv_dialect: Dialect) -> None:
        """Test tab-separated fields."""
        assert parse(tsv_dialect, "a\tb\tc") == ["a", "b", "c"]

    def test_quotes_are_data(self, tsv_dialect: Dialect) -> None:
        """With quoting disabled, quotes are ordinary characters."""
        assert parse(tsv_dialect, '"a\tb"') == ['"a', 'b"']

    def test_commas_are_data(self, tsv_dialect: Dialect) -> None:
        """Test commas inside TSV fields."""
        assert parse(tsv_dialect, "a,b\tc") == ["a,b", "c"]


class TestErrors:
    """Tests for malformed records."""

    def test_unterminated_quote(self, csv_dialect: Dialect) -> None:
        """A quote-opened field must be closed."""
        with pytest.raises(UnterminatedQuotedFieldError) as exc_info:
            parse(csv_dialect, '"abc,def')
        assert exc_info.value.offset == 8
        assert exc_info.value.code == "CSV-QUOTE-001"

    def test_lone_quote(self, csv_dialect: Dialect) -> None:
        """Test record consisting of a single quote."""
        with pytest.raises(UnterminatedQuotedFieldError) as exc_info:
            parse(csv_dialect, '"')
        assert exc_info.value.offset == 1

    def test_unexpected_quote(self, csv_dialect: Dialect) -> None:
        """An unescaped quote inside an unquoted field is malformed."""
        with pytest.raises(UnexpectedQuoteError) as exc_info:
            parse(csv_dialect, 'ab"c')
        assert exc_info.value.offset == 2
        assert exc_info.value.message == "Unescaped quote inside non-quote-delimited field"

    def test_unexpected_quote_message_with_escape(self, escape_dialect: Dialect) -> None:
        """The message hints differently when escaping is configured."""
        with pytest.raises(UnexpectedQuoteError) as exc_info:
            parse(escape_dialect, 'ab"c')
        assert exc_info.value.message == "Quote inside non-quote-delimited field"

    def test_error_in_later_field(self, csv_dialect: Dialect) -> None:
        """Offsets are relative to the whole record."""
        with pytest.raises(UnexpectedQuoteError) as exc_info:
            parse(csv_dialect, 'a,b,cd"')
        assert exc_info.value.offset == 6

    def test_errors_share_base_class(self, csv_dialect: Dialect) -> None:
        """All parse errors can be caught with RecordParseError."""
        with pytest.raises(RecordParseError):
            parse(csv_dialect, '"open')

    def test_error_str(self, csv_dialect: Dialect) -> None:
        """Test error formatting."""
        with pytest.raises(RecordParseError) as exc_info:
            parse(csv_dialect, '"open')
        text = str(exc_info.value)
        assert "CSV-QUOTE-001" in text
        assert "offset 5" in text

    def test_with_record_no(self, csv_dialect: Dialect) -> None:
        """Callers can tag errors with their record number."""
        with pytest.raises(RecordParseError) as exc_info:
            parse(csv_dialect, '"open')
        tagged = exc_info.value.with_record_no(12)
        assert isinstance(tagged, UnterminatedQuotedFieldError)
        assert "record 12" in str(tagged)


class TestDeterminism:
    """Tests that results depend only on dialect and input."""

    def test_repeated_calls(self, csv_dialect: Dialect) -> None:
        """Identical calls give identical results."""
        line = '"a""b",,c, d '
        assert parse(csv_dialect, line) == parse(csv_dialect, line)

    def test_repeated_errors(self, csv_dialect: Dialect) -> None:
        """Identical failing calls give identical errors."""
        errors = []
        for _ in range(2):
            with pytest.raises(RecordParseError) as exc_info:
                parse(csv_dialect, 'x"y')
            errors.append((type(exc_info.value), exc_info.value.offset, exc_info.value.message))
        assert errors[0] == errors[1]
