"""
Render positioning report payloads into merged PDFs.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Sequence

from tqdm import tqdm

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from positioning.ingest import DEMO_PAYLOAD, load_report, load_report_file
from positioning.pdf.builder import BuildResult, build_pdf


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Return CLI arguments for the build script."""

    parser = argparse.ArgumentParser(
        description="Build positioning report PDFs from JSON payloads."
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        type=Path,
        help="Payload JSON files or directories of payloads.",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Render the built-in demo payload instead of input files.",
    )
    parser.add_argument(
        "--output-file",
        "-o",
        type=Path,
        default=Path("output/report.pdf"),
        help="Destination for a single rendered payload.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("output"),
        help="Destination directory when several payloads are rendered.",
    )
    parser.add_argument(
        "--font-dir",
        type=Path,
        default=None,
        help="Directory with Poppins-Regular.ttf and Poppins-SemiBold.ttf.",
    )
    parser.add_argument(
        "--cover",
        type=Path,
        default=None,
        help="Cover PDF placed before the generated pages.",
    )
    parser.add_argument(
        "--trailer",
        type=Path,
        action="append",
        default=[],
        help="Template PDF appended after the generated pages (repeatable).",
    )
    return parser.parse_args(argv)


def _collect_inputs(paths: Sequence[Path]) -> List[Path]:
    """Expand directories into their JSON files, keeping order.

    Args:
        paths: Files or directories from the command line.
    Returns:
        Payload file paths.
    """

    files: List[Path] = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(path.glob("*.json")))
        else:
            files.append(path)
    return files


def main(argv: Sequence[str] | None = None) -> int:
    """Render every payload and print where the PDFs went.

    Example:
        >>> main(["--demo", "-o", "output/demo.pdf"])  # doctest: +SKIP
        0
    """

    args = _parse_args(argv)
    options = {"font_dir": args.font_dir, "cover": args.cover, "trailers": args.trailer}
    results: List[BuildResult] = []
    try:
        if args.demo:
            results.append(build_pdf(load_report(DEMO_PAYLOAD), args.output_file, **options))
        else:
            files = _collect_inputs(args.inputs)
            if not files:
                print("No payloads given; pass JSON files or --demo.", file=sys.stderr)
                return 2
            if len(files) == 1:
                results.append(build_pdf(load_report_file(files[0]), args.output_file, **options))
            else:
                for path in tqdm(files, desc="Rendering reports", unit="report"):
                    output = args.output_dir / f"{path.stem}.pdf"
                    results.append(build_pdf(load_report_file(path), output, **options))
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for result in results:
        print(
            f"Wrote {result.output_path} "
            f"({result.content_pages} generated / {result.total_pages} total pages)"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
