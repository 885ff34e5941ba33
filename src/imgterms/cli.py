#!/usr/bin/env python3
"""CLI interface for imgterms."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from tqdm import tqdm

from .config import Config
from .document import Document
from .errors import ImgTermsError
from .image_terms import ImgTerms
from .models import load_signatures


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for imgterms.

    Indexes signatures from a JSON file and prints their terms or the
    similarity query built from each indexed document.
    """
    parser = argparse.ArgumentParser(
        description="Generate index terms and similarity queries from image signatures",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument("command", choices=["terms", "query"],
                       help="terms=print indexed terms, query=print similarity query")
    parser.add_argument("signatures", type=str,
                       help="JSON file with a signature object or a list of them")

    parser.add_argument("--prefix", type=str, default="I",
                       help="Prefix for generated terms")
    parser.add_argument("--num-pixels", type=int, default=128,
                       help="Width of the Haar transform grid")
    parser.add_argument("--radius", type=int, default=8,
                       help="Buckets either side of an average matched by the query")
    parser.add_argument("--verbose", action="store_true",
                       help="Enable debug logging")

    args = parser.parse_args(argv)

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    )

    # Validate inputs
    path = Path(args.signatures)
    if not path.is_file():
        print(f"Error: Signature file not found: {args.signatures}")
        sys.exit(1)

    try:
        signatures = load_signatures(path)
    except (ValueError, ValidationError) as e:
        print(f"Error: Invalid signature file: {e}")
        sys.exit(1)

    cfg = Config(prefix=args.prefix, num_pixels=args.num_pixels, distance_radius=args.radius)
    try:
        imgterms = ImgTerms(cfg)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    for i, sig in enumerate(tqdm(signatures, desc="Indexing", disable=len(signatures) < 2)):
        label = sig.name or f"#{i}"
        doc = Document()
        try:
            imgterms.add_terms(doc, sig)
            if args.command == "terms":
                line = " ".join(doc.termlist)
            else:
                line = imgterms.query_similar(doc).describe()
        except (ValueError, ImgTermsError) as e:
            print(f"Error: Signature {label}: {e}")
            sys.exit(1)

        print(f"{label}: {line}")


if __name__ == "__main__":
    main()
