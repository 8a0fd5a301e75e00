"""
CLI entry point for text metrics.

Usage:
    # Literal text
    python -m text_metrics --text "This is an absolutely amazing product"

    # Single file
    python -m text_metrics --input notes/review.txt
    python -m text_metrics --input notes/review.txt --keywords 5 --output out/review.json

    # Standard input
    cat review.txt | python -m text_metrics

    # Batch mode: every *.txt file in a directory
    python -m text_metrics --batch notes/ --output out/batch.json
    python -m text_metrics --batch notes/ --quiet
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

from text_metrics.analysis import TextAnalyzer
from text_metrics.config import settings

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Per-file worker
# ---------------------------------------------------------------------------

def _analyze_file(
    analyzer: TextAnalyzer,
    file_path: Path,
    max_keywords: Optional[int],
) -> dict:
    """Analyze one text file and return a status record."""
    start = time.time()
    try:
        text = file_path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        return {
            'status': 'error',
            'file': file_path.name,
            'input_path': str(file_path),
            'error': str(exc),
            'elapsed_time': time.time() - start,
        }

    result = analyzer.analyze(text, max_keywords)
    return {
        'status': 'success',
        'file': file_path.name,
        'input_path': str(file_path),
        'result': result.to_report(
            precision=settings.output.precision,
            include_keywords=settings.output.include_keywords,
        ),
        'elapsed_time': time.time() - start,
    }


def _emit(payload: object, output: Optional[Path]) -> None:
    """Write JSON to output, or print it to stdout."""
    content = json.dumps(payload, indent=settings.output.indent)
    if output is None:
        print(content)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content + "\n", encoding='utf-8')
    logger.info(f"Wrote {output}")


# ---------------------------------------------------------------------------
# Single-input mode
# ---------------------------------------------------------------------------

def _run_single(args: argparse.Namespace, analyzer: TextAnalyzer) -> int:
    """Analyze --text, --input or stdin."""
    if args.text is not None:
        text = args.text
    elif args.input is not None:
        if not args.input.exists():
            logger.error(f"Input file not found: {args.input}")
            return 1
        try:
            text = args.input.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as exc:
            logger.error(f"Failed to read {args.input}: {exc}")
            return 1
    else:
        text = sys.stdin.read()

    result = analyzer.analyze(text, args.keywords)
    _emit(
        result.to_report(
            precision=settings.output.precision,
            include_keywords=settings.output.include_keywords,
        ),
        args.output,
    )
    return 0


# ---------------------------------------------------------------------------
# Batch mode
# ---------------------------------------------------------------------------

def _run_batch(args: argparse.Namespace, analyzer: TextAnalyzer) -> int:
    """Analyze every *.txt file in a directory."""
    batch_dir: Path = args.batch
    if not batch_dir.is_dir():
        logger.error(f"Batch directory not found: {batch_dir}")
        return 1

    text_files = sorted(batch_dir.glob("*.txt"))
    if not text_files:
        logger.warning(f"No .txt files found in {batch_dir}")

    start_time = time.time()
    results: List[dict] = []
    for idx, file_path in enumerate(text_files, 1):
        record = _analyze_file(analyzer, file_path, args.keywords)
        results.append(record)
        if record['status'] == 'success':
            logger.info(f"[{idx}/{len(text_files)}] OK: {record['file']}")
        else:
            logger.error(f"[{idx}/{len(text_files)}] FAILED: {record['file']} - {record['error']}")

    successful = sum(1 for r in results if r['status'] == 'success')
    failed = len(results) - successful
    summary = {
        'total_files': len(results),
        'successful': successful,
        'failed': failed,
        'elapsed_time': round(time.time() - start_time, 3),
        'results': results,
    }
    _emit(summary, args.output)
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text-metrics",
        description="Word count, sentiment, keywords, complexity and reading time for text",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--text', type=str, help='Literal text to analyze')
    source.add_argument('--input', type=Path, help='UTF-8 text file to analyze')
    source.add_argument('--batch', type=Path, help='Directory of *.txt files to analyze')
    parser.add_argument(
        '--keywords',
        type=int,
        default=None,
        help=f'Number of keywords (default: {settings.keywords.max_keywords})',
    )
    parser.add_argument('--output', type=Path, default=None, help='Write JSON here instead of stdout')
    parser.add_argument('--quiet', action='store_true', help='Only log warnings and errors')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    analyzer = TextAnalyzer()
    if args.batch is not None:
        return _run_batch(args, analyzer)
    return _run_single(args, analyzer)


if __name__ == '__main__':
    sys.exit(main())
