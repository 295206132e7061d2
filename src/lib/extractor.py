"""
Section extraction from the source stream

A section is the run of source lines after a boundary line whose name
matches the request, up to the next boundary line or end of stream. The
default extractor rescans the whole source for every directive; nothing
is cached between lookups. IndexedSectionExtractor trades that simplicity
for a single indexing pass when templates hold many directives.

Example source:

    preamble line          <- section "@HEADER"
    #intro
    Hello                  <- section "intro"
    #outro
    Bye                    <- section "outro"
"""

import sys
from typing import List, Optional, TextIO

from ..models.config import SubstConfig
from ..models.directives import DirectiveToken
from ..models.section import ExtractResult, SectionSpan
from .directives import boundary_classify, names_match, wholeFile_is
from .scanner import LineScanner
from .log import LOG


class SectionExtractor:
    """
    Writes the section selected by a directive token to an output stream

    Every call leaves the source rewound to its start, so consecutive
    lookups are independent of each other.
    """

    def __init__(self, config: SubstConfig, output: Optional[TextIO] = None) -> None:
        """
        Args:
            config: Run configuration
            output: Destination stream, defaults to sys.stdout
        """
        self.config = config
        self.output = output if output is not None else sys.stdout

    def file_copy(self, token: DirectiveToken, source: LineScanner) -> ExtractResult:
        """Copy the entire source verbatim, then rewind"""
        lines = 0
        try:
            source.rewind()
            for line in source:
                self.output.write(line)
                lines += 1
        finally:
            source.rewind()
        LOG(f"{token}: copied whole source, {lines} line(s)", level=2)
        return ExtractResult(token=token, matched=True, lines=lines, whole_file=True)

    def section_extract(self, token: DirectiveToken, source: LineScanner) -> ExtractResult:
        """
        Write the lines of every section matching token

        The scan starts from the current position, which is the start of
        the stream because each call ends with a rewind. The preamble seed
        is evaluated as if it were a boundary line ahead of the source, so
        only a request for the preamble name prints the leading lines.

        Args:
            token: Directive token from the template
            source: Scanner over the source stream

        Returns:
            ExtractResult with matched=False if nothing selected the token
        """
        if wholeFile_is(token, self.config):
            return self.file_copy(token, source)

        mode = self.config.match_mode
        printing = names_match(token.name, self.config.preamble_name, mode)
        matched = printing
        lines = 0
        try:
            for line in source:
                boundary = boundary_classify(line, self.config)
                if boundary is None:
                    if printing:
                        self.output.write(line)
                        lines += 1
                    continue
                printing = names_match(token.name, boundary.name, mode)
                matched = matched or printing
        finally:
            source.rewind()

        LOG(f"{token}: {lines} line(s), matched={matched}", level=2)
        return ExtractResult(token=token, matched=matched, lines=lines)


class IndexedSectionExtractor(SectionExtractor):
    """
    Section extractor backed by a one-time index of boundary positions

    Output is identical to SectionExtractor for every token and match mode:
    lookups walk the index in source order and apply the same comparison
    to each span. The index belongs to one source stream and is rebuilt if
    a different stream is passed in.
    """

    def __init__(self, config: SubstConfig, output: Optional[TextIO] = None) -> None:
        super().__init__(config, output)
        self.index: List[SectionSpan] = []
        self.indexed: Optional[TextIO] = None

    def index_build(self, source: LineScanner) -> List[SectionSpan]:
        """Scan the source once, recording where each section starts"""
        spans = [SectionSpan(name=self.config.preamble_name, start=0)]
        try:
            source.rewind()
            while True:
                line, found = source.line_next()
                if not found:
                    break
                boundary = boundary_classify(line, self.config)
                if boundary is not None:
                    spans.append(SectionSpan(name=boundary.name, start=source.position()))
        finally:
            source.rewind()
        self.index = spans
        self.indexed = source.stream
        LOG(f"Indexed {len(spans) - 1} section boundaries", level=2)
        return spans

    def span_copy(self, span: SectionSpan, source: LineScanner) -> int:
        """Write lines from span.start up to the next boundary"""
        lines = 0
        source.seek(span.start)
        for line in source:
            if boundary_classify(line, self.config) is not None:
                break
            self.output.write(line)
            lines += 1
        return lines

    def section_extract(self, token: DirectiveToken, source: LineScanner) -> ExtractResult:
        if wholeFile_is(token, self.config):
            return self.file_copy(token, source)

        if self.indexed is not source.stream:
            self.index_build(source)

        mode = self.config.match_mode
        matched = False
        lines = 0
        try:
            for span in self.index:
                if names_match(token.name, span.name, mode):
                    matched = True
                    lines += self.span_copy(span, source)
        finally:
            source.rewind()

        LOG(f"{token}: {lines} line(s) via index, matched={matched}", level=2)
        return ExtractResult(token=token, matched=matched, lines=lines)
