"""Directory of syllabus PDFs -> outlines.json.

Uses multiprocessing to analyze PDFs in parallel (CPU-bound task).

Input:  a directory of syllabus PDF files
Output: <output_dir>/outlines.json
"""

import json
import logging
import multiprocessing
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path

from syllabus_extractor.extractor import analyze_pdf

logger = logging.getLogger(__name__)

OUTPUT_FILENAME = "outlines.json"


def _process_single_pdf(pdf_path: Path) -> dict:
    """Analyze one PDF into an outline record (runs in worker process).

    Args:
        pdf_path: Path to the PDF file.

    Returns:
        Outline dict ready for outlines.json.
    """
    result = analyze_pdf(pdf_path)
    return {
        "pdf_name": pdf_path.stem,
        "pdf_filename": pdf_path.name,
        **result.to_dict(),
    }


def _collect_sequential(pdf_files: list[Path], outlines: list[dict],
                        failures: list[dict]) -> None:
    for pdf_path in pdf_files:
        try:
            outlines.append(_process_single_pdf(pdf_path))
        except Exception as exc:
            logger.error("Failed to process %s: %s", pdf_path.name, exc)
            failures.append({"pdf_filename": pdf_path.name, "error": str(exc)})


def build_outlines(pdf_dir: Path, output_dir: Path) -> dict:
    """Main pipeline: PDFs -> outlines.json.

    Each PDF is analyzed independently in a worker process. A PDF that
    fails to decode is recorded under "failures" and the rest continue.
    Falls back to sequential processing if the process pool fails.

    Returns the full data dict with outlines, failures and metadata.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    outlines: list[dict] = []
    failures: list[dict] = []

    pdf_files = sorted(pdf_dir.glob("*.pdf"))
    n_workers = max(1, min(len(pdf_files), multiprocessing.cpu_count() or 1))
    logger.info("Analyzing %d PDFs with %d worker processes", len(pdf_files), n_workers)

    if pdf_files:
        try:
            with ProcessPoolExecutor(max_workers=n_workers) as pool:
                futures = {
                    pool.submit(_process_single_pdf, pdf_path): pdf_path
                    for pdf_path in pdf_files
                }
                for future in as_completed(futures):
                    pdf_path = futures[future]
                    try:
                        outlines.append(future.result())
                        logger.info("Processed %s", pdf_path.name)
                    except Exception as exc:
                        logger.error("Failed to process %s: %s", pdf_path.name, exc)
                        failures.append({"pdf_filename": pdf_path.name, "error": str(exc)})
        except Exception as exc:
            logger.warning("Process pool failed (%s), falling back to sequential", exc)
            outlines.clear()
            failures.clear()
            _collect_sequential(pdf_files, outlines, failures)

    # Deterministic output regardless of completion order
    outlines.sort(key=lambda o: o["pdf_filename"])
    failures.sort(key=lambda f: f["pdf_filename"])

    data = {
        "outlines": outlines,
        "failures": failures,
        "metadata": {
            "total_pdfs": len(pdf_files),
            "total_subjects": sum(len(o["subjects"]) for o in outlines),
            "total_chapters": sum(
                len(s["chapters"]) for o in outlines for s in o["subjects"]
            ),
        },
    }

    json_path = output_dir / OUTPUT_FILENAME
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    logger.info("Saved %d outlines to %s", len(outlines), json_path)

    return data
