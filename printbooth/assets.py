"""Locate the PDF.js worker shipped with pdfjs-dist and copy it into the client's served assets."""
import shutil
from pathlib import Path

# Newest layout first; within a layout the minified build wins.
PDF_WORKER_CANDIDATES = (
    ("build", "pdf.worker.min.mjs"),
    ("build", "pdf.worker.mjs"),
    ("build", "pdf.worker.min.js"),
    ("build", "pdf.worker.js"),
    ("legacy", "build", "pdf.worker.min.js"),
    ("legacy", "build", "pdf.worker.js"),
    ("webpack", "pdf.worker.min.js"),
    ("webpack", "pdf.worker.js"),
)


class PdfWorkerNotFound(FileNotFoundError):
    pass


def find_pdf_worker(client_dir: Path) -> Path | None:
    package_dir = Path(client_dir) / "node_modules" / "pdfjs-dist"
    for parts in PDF_WORKER_CANDIDATES:
        candidate = package_dir.joinpath(*parts)
        if candidate.is_file():
            return candidate
    return None


def worker_target_name(source: Path) -> str:
    minified = ".min." in source.name
    extension = ".mjs" if source.suffix == ".mjs" else ".js"
    return f"pdf.worker{'.min' if minified else ''}{extension}"


def copy_pdf_worker(client_dir: Path) -> Path:
    """Copy the worker to <client_dir>/public/assets and return the copied file."""
    source = find_pdf_worker(client_dir)
    if source is None:
        raise PdfWorkerNotFound(f"No PDF.js worker found under {Path(client_dir) / 'node_modules' / 'pdfjs-dist'}")
    assets_dir = Path(client_dir) / "public" / "assets"
    assets_dir.mkdir(parents=True, exist_ok=True)
    target = assets_dir / worker_target_name(source)
    shutil.copyfile(source, target)
    return target
