import argparse
import json
import logging
import sys
from pathlib import Path

from ..config import load_settings
from .config import ConvertConfig
from .pipeline import parse_document_with_markup


def main(argv=None):
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Rebuild reading order and sections from a PDF")

    # Input/Output
    parser.add_argument("pdf_path", help="Path to input PDF file")
    parser.add_argument("--save_dir", "-o", default="output", help="Directory to save output (default: output)")
    parser.add_argument("--json", action="store_true", help="Also write sections.json")

    parser.add_argument("--workers", type=int, default=settings.workers, help="Parallel page workers")
    parser.add_argument("--page-numbers", action="store_true", default=settings.include_page_numbers,
                        help="Append page-range comments after each section")
    parser.add_argument("--no-math", action="store_true", help="Do not re-emit math delimiters")

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING),
                        format="%(levelname)s %(name)s: %(message)s")

    pdf_path = Path(args.pdf_path)
    try:
        data = pdf_path.read_bytes()
    except OSError as e:
        print(f"Error: {e}")
        return 1

    cfg = ConvertConfig(workers=max(1, args.workers))
    result = parse_document_with_markup(
        data,
        {"include_page_numbers": args.page_numbers, "preserve_math": not args.no_math},
        cfg,
    )
    if not result.ok:
        print(f"Error: {result.error.message} {result.error.recovery_action}")
        return 1

    save_dir = Path(args.save_dir).resolve()
    save_dir.mkdir(parents=True, exist_ok=True)
    out_file = save_dir / "output.md"
    out_file.write_text(result.markup, encoding="utf-8")
    print(f"{len(result.sections)} sections from {result.page_count} pages. Saved to {out_file}")

    if args.json:
        payload = {
            "page_count": result.page_count,
            "metadata": result.metadata.model_dump(),
            "sections": [s.model_dump() for s in result.sections],
        }
        (save_dir / "sections.json").write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return 0


if __name__ == "__main__":
    sys.exit(main())
