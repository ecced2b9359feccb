"""
python -m syllabus_extractor — extract a subject/chapter outline
=================================================================

    python -m syllabus_extractor syllabus.pdf
    python -m syllabus_extractor notes.txt --text --output outline.json
    python -m syllabus_extractor pdfs/ --batch out/

Prints the outline as JSON. Exit codes: 0 ok, 1 missing input,
2 unreadable PDF or text file.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from syllabus_extractor.batch_builder import build_outlines
from syllabus_extractor.config import LOG_LEVEL_ENV, configure_logging, load_env_file
from syllabus_extractor.extractor import analyze_pdf, extract_syllabus
from syllabus_extractor.pdf_parser import PdfDecodeError

logger = logging.getLogger(__name__)

NOTHING_DETECTED_MESSAGE = "No structure detected; please edit the outline manually."


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="syllabus_extractor",
        description="Offline heuristic extraction of subjects and chapters from a syllabus.",
    )
    parser.add_argument("path", type=Path, help="PDF file, text file (--text) or directory (--batch)")
    parser.add_argument("--output", "-o", type=Path, help="write JSON here instead of stdout")
    parser.add_argument("--text", action="store_true", help="treat PATH as UTF-8 text")
    parser.add_argument("--batch", type=Path, metavar="OUTPUT_DIR",
                        help="analyze every PDF in directory PATH into OUTPUT_DIR/outlines.json")
    parser.add_argument("--env-file", type=Path, default=Path(".env"))
    parser.add_argument("--log-level", help="overrides SYLLABUS_LOG_LEVEL")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    load_env_file(args.env_file)
    if args.log_level:
        os.environ[LOG_LEVEL_ENV] = args.log_level
    configure_logging()

    if not args.path.exists():
        print(f"ERROR: {args.path} not found", file=sys.stderr)
        return 1

    if args.batch:
        data = build_outlines(args.path, args.batch)
        print(f"Saved {len(data['outlines'])} outlines, {len(data['failures'])} failures")
        return 0

    try:
        if args.text:
            result = extract_syllabus(args.path.read_text(encoding="utf-8"))
        else:
            result = analyze_pdf(args.path)
    except (PdfDecodeError, UnicodeDecodeError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    payload = json.dumps(result.to_dict(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(payload + "\n", encoding="utf-8")
        logger.info("Outline written to %s", args.output)
    else:
        print(payload)
    if result.nothing_detected:
        print(NOTHING_DETECTED_MESSAGE, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
