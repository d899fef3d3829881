#!/usr/bin/env python3

"""
Validate a NAPPI file before deploying it.

Parses the file with the same loader the API uses, prints entry counts and
optionally runs sample autocomplete queries against it.
"""

import argparse
import sys
import os
import time

# Add the source tree to the Python path
sys.path.append(os.path.join(os.path.abspath(os.path.dirname(__file__)), '..', 'src'))

from nappi_lookup.catalog import NappiCatalog
from nappi_lookup.errors import CatalogError


def check_nappi_file(data_file: str, queries=None) -> bool:
    """
    Load a NAPPI file and report on it.

    Args:
        data_file: Path to the fixed-width NAPPI file
        queries: Optional search terms to run against the loaded catalog

    Returns:
        True if the whole file parsed, False otherwise
    """
    print(f"Checking NAPPI file {data_file}...")
    catalog = NappiCatalog(data_file)

    try:
        snapshot = catalog.load()
    except CatalogError as e:
        print(f"INVALID: {e}")
        return False

    print(f"Entries:        {len(snapshot):,}")
    print(f"Distinct names: {snapshot.distinct_names:,}")
    print(f"Load time:      {catalog.load_time:.3f} seconds")

    for query in queries or []:
        start_time = time.time()
        results = catalog.search(query)
        elapsed = (time.time() - start_time) * 1000
        print(f"\nQuery {query!r}: {len(results)} matches in {elapsed:.2f} ms")
        for record in results[:10]:
            print(f"  {record.code:<9} {record.name:<38} {record.strength:<16} {record.form}")
        if len(results) > 10:
            print(f"  ... {len(results) - 10} more")

    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Validate a fixed-width NAPPI file.")
    parser.add_argument("data_file", help="Path to the NAPPI file")
    parser.add_argument(
        "--query", "-q",
        action="append",
        default=[],
        help="Sample search term to run (may be repeated)"
    )
    args = parser.parse_args(argv)

    return 0 if check_nappi_file(args.data_file, args.query) else 1


if __name__ == "__main__":
    sys.exit(main())
