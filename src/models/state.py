"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, Callable, TYPE_CHECKING
from dataclasses import dataclass, field

if TYPE_CHECKING:
    from .config import SubstConfig
    from .section import SubstResult


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the substitution pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: templateFile, sourceFile, delimiter, special, legacyMatch,
          indexed, verbosity
        - env_check: templatePath, sourcePath, config, envOK
        - substitution_run: substResult
        - results_report: (no additions, terminal stage)

    Attributes:
        templateFile: Template path as given on the command line
        sourceFile: Source path as given on the command line
        delimiter: Delimiter override (-s), None to use settings
        special: Secondary marker override (-h), None to use settings
        legacyMatch: Use length-bounded legacy name matching
        indexed: Use the indexed section extractor
        verbosity: Logging verbosity level (0-3)
        encoding: Text encoding for both input files
        envOK: Environment validation passed
        templatePath: Resolved template path
        sourcePath: Resolved source path
        config: Frozen run configuration
        substResult: Summary returned by the substitution driver
    """

    # CLI arguments
    templateFile: str = field(default="")
    sourceFile: str = field(default="")
    delimiter: Optional[str] = field(default=None)
    special: Optional[str] = field(default=None)
    legacyMatch: bool = field(default=False)
    indexed: bool = field(default=False)
    verbosity: int = field(default=0)
    encoding: str = field(default="utf-8")

    # Pipeline state
    envOK: bool = field(default=False)
    templatePath: Path = field(default=Path("/"))
    sourcePath: Path = field(default=Path("/"))
    config: Optional["SubstConfig"] = field(default=None)
    substResult: Optional["SubstResult"] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace
    ) -> "ProgramState":
        """
        Create ProgramState from an argparse Namespace.

        Args:
            options: Parsed CLI arguments (templateFile, sourceFile, etc.)

        Returns:
            ProgramState instance with all known CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Namespace may carry argparse-only entries; keep ProgramState fields
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            substitution_run,
            results_report
        )

    This is equivalent to:
        results_report(substitution_run(env_check(initial_state)))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
