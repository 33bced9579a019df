"""Tests for the Yantrabhashi statement segmenter."""

from src.validator.segmenter import LogicalStatement, segment


def texts(source: str) -> list[str]:
    return [s.text for s in segment(source)]


def lines(source: str) -> list[int]:
    return [s.line_num for s in segment(source)]


# --- Basic grouping ---

class TestBasicGrouping:
    def test_empty_input(self):
        assert segment("") == []

    def test_single_statement(self):
        assert segment("PADAM a:ANKHE;") == [LogicalStatement("PADAM a:ANKHE;", 1)]

    def test_statements_per_line(self):
        src = "PADAM a:ANKHE;\nCHEPPU(a);\nCHATIMPU(a);"
        assert texts(src) == ["PADAM a:ANKHE;", "CHEPPU(a);", "CHATIMPU(a);"]
        assert lines(src) == [1, 2, 3]

    def test_crlf_line_endings(self):
        src = "PADAM a:ANKHE;\r\nCHATIMPU(a);\r\n"
        assert texts(src) == ["PADAM a:ANKHE;", "CHATIMPU(a);"]
        assert lines(src) == [1, 2]

    def test_block_opener_and_closer(self):
        src = 'ELAITHE (a == 1) [\nCHATIMPU("one");\n]'
        assert texts(src) == ['ELAITHE (a == 1) [', 'CHATIMPU("one");', ']']

    def test_whitespace_is_normalized(self):
        assert texts("PADAM   a :\tANKHE  =  5 ;") == ["PADAM a : ANKHE = 5 ;"]

    def test_leading_indentation_dropped(self):
        assert texts("    CHATIMPU(a);") == ["CHATIMPU(a);"]


# --- Comments and blank lines ---

class TestComments:
    def test_full_line_comment_skipped(self):
        src = "# header comment\nPADAM a:ANKHE;"
        assert segment(src) == [LogicalStatement("PADAM a:ANKHE;", 2)]

    def test_indented_comment_skipped(self):
        assert texts("   # note\nCHATIMPU(a);") == ["CHATIMPU(a);"]

    def test_inline_comment_stripped(self):
        assert texts("PADAM a:ANKHE; # counter") == ["PADAM a:ANKHE;"]

    def test_blank_lines_do_not_shift_line_numbers(self):
        src = "\n\nPADAM a:ANKHE;\n\n\nCHATIMPU(a);"
        assert lines(src) == [3, 6]


# --- Multi-line statements ---

class TestMultiLine:
    def test_unterminated_line_joins_next(self):
        src = "PADAM a:ANKHE\nCHATIMPU(a);"
        assert segment(src) == [LogicalStatement("PADAM a:ANKHE CHATIMPU(a);", 1)]

    def test_statement_attributed_to_first_line(self):
        src = "CHATIMPU(a);\nsum = a +\n  b;"
        assert segment(src)[1] == LogicalStatement("sum = a + b;", 2)

    def test_trailing_unterminated_statement_flushed(self):
        assert segment("PADAM a:ANKHE") == [LogicalStatement("PADAM a:ANKHE", 1)]


# --- Loop headers ---

class TestLoopHeader:
    def test_single_line_header(self):
        src = "MALLI-MALLI (PADAM i:ANKHE = 1; i <= 10; i = i + 1) [\nsum = sum + i;\n]"
        assert texts(src) == [
            "MALLI-MALLI (PADAM i:ANKHE = 1; i <= 10; i = i + 1) [",
            "sum = sum + i;",
            "]",
        ]

    def test_header_spanning_lines(self):
        src = (
            "MALLI-MALLI (PADAM i:ANKHE = 1;\n"
            "    i <= 10;\n"
            "    i = i + 1) [\n"
            "CHATIMPU(i);\n"
            "]"
        )
        stmts = segment(src)
        assert stmts[0] == LogicalStatement(
            "MALLI-MALLI (PADAM i:ANKHE = 1; i <= 10; i = i + 1) [", 1)
        assert stmts[1] == LogicalStatement("CHATIMPU(i);", 4)
        assert stmts[2] == LogicalStatement("]", 5)

    def test_bracket_on_following_line(self):
        src = "MALLI-MALLI (PADAM i:ANKHE = 1; i < 3; i = i + 1)\n[\n]"
        assert texts(src) == [
            "MALLI-MALLI (PADAM i:ANKHE = 1; i < 3; i = i + 1) [",
            "]",
        ]

    def test_semicolons_inside_header_do_not_split(self):
        stmts = segment("MALLI-MALLI (PADAM i:ANKHE = 1;\ni < 3;\ni = i + 1) [")
        assert len(stmts) == 1

    def test_unclosed_header_flushed_at_end(self):
        stmts = segment("MALLI-MALLI (PADAM i:ANKHE = 1;\ni < 3;")
        assert stmts == [LogicalStatement("MALLI-MALLI (PADAM i:ANKHE = 1; i < 3;", 1)]
