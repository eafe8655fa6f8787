"""
Command-line entry point.

Usage:
    arithmetic-calc "2 + 2" "20 / 2"
    arithmetic-calc --file resources/operations.7z [--output results.txt]

Exit status is 0 when every expression evaluated, 1 when at least one failed,
2 for usage or configuration errors.
"""
import argparse
from pathlib import Path
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, FilePath, ValidationError, field_validator, model_validator

from arithmetic_calculator.batch.evaluator import BatchEvaluator
from arithmetic_calculator.common.config import get_settings
from arithmetic_calculator.common.logger import configure_logging, logger


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expressions : List[str]
        Expressions given directly on the command line.
    file : FilePath, optional
        Operations file (plain text or archive) to evaluate.
    output : Path, optional
        Where to write the results of `file`.
    """

    expressions: List[str] = Field(default_factory=list)
    file: Optional[FilePath] = None
    output: Optional[Path] = None

    @field_validator("expressions")
    def expressions_must_not_be_blank(cls, v: List[str]) -> List[str]:
        """Reject empty or whitespace-only expressions."""
        if any(not expr.strip() for expr in v):
            raise ValueError("Expressions cannot be empty")
        return v

    @model_validator(mode="after")
    def needs_some_input(self) -> "CliArgs":
        if not self.expressions and self.file is None:
            raise ValueError("Give at least one expression or --file")
        if self.output is not None and self.file is None:
            raise ValueError("--output requires --file")
        return self


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param list argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="arithmetic-calc",
        description="Evaluate single-operator arithmetic expressions such as '2 + 2'",
    )
    parser.add_argument("expressions", nargs="*", help="Expressions to evaluate")
    parser.add_argument("--file", help="Path to a file (or .zip/.tar.xz/.7z archive) of expressions")
    parser.add_argument("--output", help="Path of the results file written for --file")

    args = parser.parse_args(argv)

    try:
        return CliArgs(expressions=args.expressions, file=args.file, output=args.output)
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Evaluate the requested expressions.

    :param list argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Process exit status
    :rtype: int
    """
    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.error(f"⚙️❌ Invalid ARITHMETIC_* settings: {exc}")
        return 2
    configure_logging(settings)
    cli_args = parse_args(argv)

    evaluator = BatchEvaluator(output_file=cli_args.output)
    ok = True

    if cli_args.expressions:
        results = evaluator.run(cli_args.expressions, sys.stdout)
        ok = all(r.ok for r in results)

    if cli_args.file is not None:
        try:
            results = evaluator.run_file(cli_args.file)
        except ValueError as exc:
            logger.error(f"📄❌ Could not read {cli_args.file}: {exc}")
            return 1
        ok = ok and all(r.ok for r in results)

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
