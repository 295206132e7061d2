"""
Substitution driver

Copies the template to the output line by line, replacing each directive
line with the section it names. Output is written as it is produced; the
directive line itself is never echoed.
"""

import io
import sys
from typing import Optional, TextIO

from ..models.config import SubstConfig
from ..models.section import SubstResult
from .directives import directive_classify
from .extractor import SectionExtractor, IndexedSectionExtractor
from .scanner import LineScanner
from .log import LOG, WARN


class Substituter:
    """
    Runs a template against a source

    Responsibilities:
    - Read template lines in order
    - Pass ordinary lines through unchanged
    - Hand directive tokens to the section extractor
    - Report directives that selected nothing
    """

    def __init__(
        self,
        config: Optional[SubstConfig] = None,
        output: Optional[TextIO] = None,
        extractor: Optional[SectionExtractor] = None,
        indexed: bool = False,
    ) -> None:
        """
        Args:
            config: Run configuration (defaults built from settings)
            output: Destination stream, defaults to sys.stdout
            extractor: Explicit extractor; overrides `indexed`
            indexed: Use IndexedSectionExtractor instead of rescanning
        """
        self.config = config if config is not None else SubstConfig.config_create()
        self.output = output if output is not None else sys.stdout
        if extractor is None:
            extractor_cls = IndexedSectionExtractor if indexed else SectionExtractor
            extractor = extractor_cls(self.config, self.output)
        self.extractor = extractor

    def run(self, template: TextIO, source: TextIO) -> SubstResult:
        """
        Substitute every directive in template with its section from source

        Args:
            template: Template stream, read once front to back
            source: Seekable source stream, rewound after every directive

        Returns:
            SubstResult with status True once the template is exhausted
        """
        result = SubstResult()
        source_scanner = LineScanner(source)
        source_scanner.rewind()

        for line in LineScanner(template):
            result.template_lines += 1
            token = directive_classify(line, self.config)
            if token is None:
                self.output.write(line)
                continue

            result.directives += 1
            extracted = self.extractor.section_extract(token, source_scanner)
            result.emitted_lines += extracted.lines
            if not extracted.matched:
                result.unmatched.append(token.text)
                WARN(f"Line {result.template_lines}: {token} matched no section")

        LOG(
            f"Processed {result.template_lines} template lines, "
            f"{result.directives} directives",
            level=1,
        )
        result.status = True
        return result


def text_substitute(
    template: str,
    source: str,
    config: Optional[SubstConfig] = None,
    indexed: bool = False,
) -> str:
    """
    Run a substitution over in-memory text

    Example:
        >>> text_substitute("Hello\\n#greeting\\nBye\\n", "#greeting\\nWorld\\n")
        'Hello\\nWorld\\nBye\\n'
    """
    output = io.StringIO()
    substituter = Substituter(config=config, output=output, indexed=indexed)
    substituter.run(io.StringIO(template, newline=""), io.StringIO(source, newline=""))
    return output.getvalue()
