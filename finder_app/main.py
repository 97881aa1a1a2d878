from __future__ import annotations

import argparse
from .config import SETTINGS
from .finder import DocumentFinder
from .interfaces import SearchResult
from .library import SORT_KEYS
from .logging_setup import configure_logging
from .messages import no_results_response


def _print_result(result: SearchResult, legacy: bool) -> None:
    if legacy:
        print(result.to_legacy_string())
        return
    where = f"word {result.position}"
    if result.line is not None:
        where = f"line {result.line}, word {result.line_position}"
    print(f"\n{result.document} ({where})\n  {result.snippet}")


def main():
    parser = argparse.ArgumentParser(description="Word and phrase search over a folder of txt/pdf/docx documents")
    parser.add_argument("--library", default=SETTINGS.library_dir, help="Folder with the documents to index")
    parser.add_argument("--sort", choices=SORT_KEYS, default=SETTINGS.sort_by)
    parser.add_argument("--legacy", action="store_true", help="Print results in the colon-delimited legacy format")
    parser.add_argument("--log-level", default=SETTINGS.log_level)
    args = parser.parse_args()

    configure_logging(args.log_level)
    finder = DocumentFinder(args.library)
    total = finder.load_library()
    if total == 0:
        print(f"No words indexed from {args.library}.")
        return

    print("Type a word or phrase (Ctrl+C to exit). ':docs' lists documents, ':reload' re-indexes:")
    try:
        while True:
            q = input("\nQ> ").strip()
            if not q:
                continue
            if q == ":docs":
                for path in finder.documents:
                    print(f"  {path.name} ({path.suffix.lstrip('.')})")
                continue
            if q == ":reload":
                finder.refresh()
                continue
            results = finder.search(q, sort_by=args.sort)
            if not results:
                print(no_results_response(q))
                continue
            for r in results:
                _print_result(r, args.legacy)
            print(f"\n{len(results)} match(es)")
    except (KeyboardInterrupt, EOFError):
        print("\nBye")


if __name__ == "__main__":
    main()
