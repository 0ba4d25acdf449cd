"""
Copy the PDF.js worker from the client's node_modules into client/public/assets.
Run before building the client bundle:
  python scripts/copy_pdfjs_worker.py [client_dir]    (default: ./client)
"""
import argparse
import os
import sys
from pathlib import Path

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from printbooth.assets import PdfWorkerNotFound, copy_pdf_worker


def main():
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("client_dir", nargs="?", default="client", help="Directory holding node_modules/ and public/")
    args = parser.parse_args()

    try:
        target = copy_pdf_worker(Path(args.client_dir))
    except PdfWorkerNotFound as e:
        print(f"Could not find the PDF.js worker file from any known location: {e}")
        print("Please check your pdfjs-dist installation")
        sys.exit(1)
    print(f"PDF.js worker copied to {target}")


if __name__ == "__main__":
    main()
