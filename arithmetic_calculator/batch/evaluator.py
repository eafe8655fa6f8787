"""Evaluate a batch of expressions and write one result line per expression."""
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_calculator.batch.loader import build_output_path, load_expressions
from arithmetic_calculator.common.config import get_settings
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.models import OperationRequest, OperationResult
from arithmetic_calculator.common.parser import evaluate_to_result


class BatchEvaluator(BaseModel):
    """
    Evaluates expressions line by line.

    Behaviour:
        - Blank lines are skipped, the remaining lines are numbered from 1.
        - Each expression is evaluated independently, in input order.
        - A failing expression is written as an error line and does not stop the batch.
        - Each result line is flushed as soon as it is written.
    """

    model_config = ConfigDict(frozen=True)

    output_file: Optional[Path] = Field(default=None, description="Path to write computation results")
    precision: Optional[int] = Field(
        default_factory=lambda: get_settings().result_precision,
        ge=0,
        description="Decimal places used when rendering results",
    )

    @staticmethod
    def _requests(lines: Iterable[str]) -> List[OperationRequest]:
        """Wrap the non-blank lines as requests."""
        return [OperationRequest(expression=line.strip()) for line in lines if line.strip()]

    def _evaluate(self, request: OperationRequest, line_number: int) -> OperationResult:
        result = evaluate_to_result(request.expression, line=line_number)
        if not result.ok:
            logger.error(
                f"❌ Expression failed on line {line_number}: {result.error}",
                expression=request.expression,
                error_kind=result.error_kind,
            )
        return result

    def iter_results(self, lines: Iterable[str]) -> Iterator[OperationResult]:
        """Lazily evaluate expressions, yielding one result per non-blank line."""
        for line_number, request in enumerate(self._requests(lines), start=1):
            yield self._evaluate(request, line_number)

    def evaluate_lines(self, lines: Iterable[str]) -> List[OperationResult]:
        """
        Evaluate every expression.

        :param Iterable[str] lines: Expressions to evaluate

        :return: One result per non-blank line, in input order
        :rtype: List[OperationResult]
        """
        return list(self.iter_results(lines))

    def run(self, lines: Iterable[str], f_out: TextIO) -> List[OperationResult]:
        """
        Evaluate expressions and write each rendered result to an open stream.

        :param Iterable[str] lines: Expressions to evaluate
        :param TextIO f_out: Open text stream for the results

        :return: One result per non-blank line, in input order
        :rtype: List[OperationResult]
        """
        results: List[OperationResult] = []
        for result in self.iter_results(lines):
            f_out.write(result.render(self.precision) + "\n")
            # Flush so progress survives an interrupted run
            f_out.flush()
            results.append(result)
        return results

    def run_file(self, input_file: Path) -> List[OperationResult]:
        """
        Evaluate an operations file and write the results to `output_file`.

        When `output_file` is not set, results go next to the input file
        (see `build_output_path`).

        :param Path input_file: Plain text file or archive of expressions

        :return: One result per expression, in input order
        :rtype: List[OperationResult]
        :raises ValueError: If the input archive is corrupt, unsupported, or holds no .txt file
        """
        input_file = Path(input_file)
        output_file = self.output_file or build_output_path(input_file)
        lines = load_expressions(input_file)
        logger.info(f"🏁 Evaluating {len(lines)} expressions from {input_file}")

        with output_file.open("w", encoding="utf-8") as f_out:
            results = self.run(lines, f_out)

        failed = sum(1 for r in results if not r.ok)
        logger.info(f"✅ Results written to {output_file}", total=len(results), failed=failed)
        return results
