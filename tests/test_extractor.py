"""
Section extractor tests

Covers the rescanning extractor and checks the indexed variant against it.
"""

import io

import pytest

from tmpl.lib.extractor import SectionExtractor, IndexedSectionExtractor
from tmpl.lib.scanner import LineScanner
from tmpl.models import SubstConfig, MatchMode, DirectiveToken


SOURCE = (
    "preamble\n"
    "#intro\n"
    "Hello\n"
    "World\n"
    "#outro\n"
    "Bye\n"
)


def extract(name, source, config=None, extractor_cls=SectionExtractor):
    """Run one lookup, return (output, result, scanner)"""
    config = config or SubstConfig()
    output = io.StringIO()
    scanner = LineScanner(io.StringIO(source, newline=""))
    extractor = extractor_cls(config, output)
    result = extractor.section_extract(DirectiveToken("#", name), scanner)
    return output.getvalue(), result, scanner


class TestNamedSections:
    """Test extraction of named sections"""

    def test_middle_section(self):
        """Lines up to the next boundary"""
        output, result, _ = extract("intro", SOURCE)
        assert output == "Hello\nWorld\n"
        assert result.matched
        assert result.lines == 2

    def test_last_section_runs_to_end(self):
        """Section with no following boundary ends at end of stream"""
        output, _, _ = extract("outro", SOURCE)
        assert output == "Bye\n"

    def test_unterminated_final_line(self):
        """Final line without newline is copied as is"""
        output, _, _ = extract("a", "#a\nx\ny")
        assert output == "x\ny"

    def test_empty_section(self):
        """Boundary immediately followed by another boundary"""
        output, result, _ = extract("a", "#a\n#b\nx\n")
        assert output == ""
        assert result.matched

    def test_repeated_sections_concatenate(self):
        """Every matching boundary contributes its lines"""
        output, _, _ = extract("a", "#a\n1\n#b\n2\n#a\n3\n")
        assert output == "1\n3\n"

    def test_indented_delimiter_is_content(self):
        """An indented '#' inside a section is ordinary text"""
        output, _, _ = extract("a", "#a\n  #b\nx\n")
        assert output == "  #b\nx\n"

    def test_crlf_preserved(self):
        output, _, _ = extract("a", "#a\r\nx\r\n#b\r\n")
        assert output == "x\r\n"


class TestUnmatched:
    """Test tokens without a boundary"""

    def test_missing_section_emits_nothing(self):
        output, result, _ = extract("missing", "#x\ny\n")
        assert output == ""
        assert not result.matched
        assert result.lines == 0

    def test_no_boundaries(self):
        output, result, _ = extract("x", "a\nb\n")
        assert output == ""
        assert not result.matched


class TestReservedNames:
    """Test whole-file and preamble handling"""

    def test_whole_file(self):
        output, result, _ = extract("@CONTENT", SOURCE)
        assert output == SOURCE
        assert result.whole_file
        assert result.lines == 6

    def test_whole_file_without_boundaries(self):
        output, _, _ = extract("@CONTENT", "a\nb\n")
        assert output == "a\nb\n"

    def test_whole_file_empty_source(self):
        output, result, _ = extract("@CONTENT", "")
        assert output == ""
        assert result.matched

    def test_preamble_not_in_named_section(self):
        """Lines before the first boundary never leak into a named request"""
        for name in ("intro", "outro", "missing"):
            output, _, _ = extract(name, SOURCE)
            assert "preamble" not in output

    def test_preamble_by_reserved_name(self):
        output, _, _ = extract("@HEADER", SOURCE)
        assert output == "preamble\n"


class TestRewindDiscipline:
    """Test that every lookup leaves the source at its start"""

    @pytest.mark.parametrize("name", ["intro", "missing", "@CONTENT", "@HEADER"])
    def test_rewound_after_call(self, name):
        _, _, scanner = extract(name, SOURCE)
        assert scanner.line_next() == ("preamble\n", True)

    def test_repeated_calls_identical(self):
        """Two lookups in a row give the same output"""
        output = io.StringIO()
        scanner = LineScanner(io.StringIO(SOURCE))
        extractor = SectionExtractor(SubstConfig(), output)
        token = DirectiveToken("#", "intro")
        extractor.section_extract(token, scanner)
        first = output.getvalue()
        extractor.section_extract(token, scanner)
        assert output.getvalue() == first + first


class TestLegacyMatching:
    """Test length-bounded matching"""

    def test_short_request_matches_longer_boundary(self):
        legacy = SubstConfig(match_mode=MatchMode.LEGACY)
        output, _, _ = extract("in", SOURCE, legacy)
        assert output == "Hello\nWorld\n"

    def test_strict_rejects_prefix(self):
        output, result, _ = extract("in", SOURCE)
        assert output == ""
        assert not result.matched

    def test_long_request_matches_shorter_boundary(self):
        legacy = SubstConfig(match_mode=MatchMode.LEGACY)
        output, _, _ = extract("introduction", SOURCE, legacy)
        assert output == "Hello\nWorld\n"


class TestIndexedExtractor:
    """The indexed variant must reproduce the rescanning output"""

    SOURCES = [
        SOURCE,
        "#a\n1\n#b\n2\n#a\n3\n",
        "no boundaries\n",
        "#a\nx\ny",
        "#a\r\nx\r\n#b\r\ny\r\n",
        "#\nempty name\n#a\nx\n",
        "",
    ]
    NAMES = ["intro", "outro", "in", "a", "b", "", "missing", "@HEADER", "@CONTENT", "@"]

    @pytest.mark.parametrize("mode", [MatchMode.STRICT, MatchMode.LEGACY])
    def test_matches_baseline(self, mode):
        config = SubstConfig(match_mode=mode)
        for source in self.SOURCES:
            for name in self.NAMES:
                baseline = extract(name, source, config)
                indexed = extract(name, source, config, IndexedSectionExtractor)
                assert indexed[0] == baseline[0], (source, name)
                assert indexed[1].matched == baseline[1].matched, (source, name)

    def test_index_built_once(self):
        output = io.StringIO()
        scanner = LineScanner(io.StringIO(SOURCE))
        extractor = IndexedSectionExtractor(SubstConfig(), output)
        extractor.section_extract(DirectiveToken("#", "intro"), scanner)
        index = extractor.index
        extractor.section_extract(DirectiveToken("#", "outro"), scanner)
        assert extractor.index is index
        assert [span.name for span in index] == ["@HEADER", "intro", "outro"]
        assert output.getvalue() == "Hello\nWorld\nBye\n"

    def test_rewound_after_call(self):
        _, _, scanner = extract("intro", SOURCE, extractor_cls=IndexedSectionExtractor)
        assert scanner.line_next() == ("preamble\n", True)
