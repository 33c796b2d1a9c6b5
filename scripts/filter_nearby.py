#!/usr/bin/env python3
"""
Filter a CSV of points down to those within --max-km of (--lat, --lng).

CSV must have a header row with latitude/longitude columns (default names
"latitude" and "longitude"; override with --lat-col / --lng-col).
Matching rows are written to stdout as CSV, in input order, with all columns.

  python scripts/filter_nearby.py --csv points.csv --lat 40.11 --lng -88.24 --max-km 5
"""
import argparse
import csv
import logging
import sys
from pathlib import Path

# Add repo root to path
root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root))

from geonear.geo import haversine_distance_km
from geonear.models import Coordinate
from geonear.settings import get_settings

logger = logging.getLogger("filter_nearby")


def _normalize_header(name: str) -> str:
    # Strip BOM / spaces
    return name.strip().lower().lstrip("\ufeff")


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Filter CSV points by Haversine distance")
    parser.add_argument("--csv", required=True, type=Path, help="Path to CSV with a header row")
    parser.add_argument("--lat", required=True, type=float, help="Center latitude (degrees)")
    parser.add_argument("--lng", required=True, type=float, help="Center longitude (degrees)")
    parser.add_argument("--max-km", required=True, type=float, help="Maximum distance from center in km")
    parser.add_argument("--lat-col", default=settings.latitude_column_name, help="Latitude column name")
    parser.add_argument("--lng-col", default=settings.longitude_column_name, help="Longitude column name")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )

    if not args.csv.exists():
        print(f"Error: CSV not found: {args.csv}", file=sys.stderr)
        return 1

    center = Coordinate.from_pair((args.lat, args.lng))

    try:
        return _filter_csv(args.csv, center, args.lat_col, args.lng_col, args.max_km)
    except UnicodeDecodeError as e:
        print(f"Error: CSV is not valid UTF-8: {args.csv} ({e.reason} at byte {e.start})", file=sys.stderr)
        return 1


def _filter_csv(path: Path, center: Coordinate, lat_name: str, lng_name: str, max_km: float) -> int:
    lat_col = _normalize_header(lat_name)
    lng_col = _normalize_header(lng_name)
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if not reader.fieldnames:
            print("Error: empty CSV", file=sys.stderr)
            return 1
        by_normalized = {_normalize_header(h): h for h in reader.fieldnames}
        if lat_col not in by_normalized or lng_col not in by_normalized:
            print(
                f"Error: CSV must have {lat_name} and {lng_name} columns. Got: {list(by_normalized)}",
                file=sys.stderr,
            )
            return 1

        writer = csv.DictWriter(sys.stdout, fieldnames=reader.fieldnames, lineterminator="\n")
        writer.writeheader()
        total = matched = 0
        for line_no, row in enumerate(reader, start=2):
            total += 1
            try:
                point = Coordinate.from_pair(
                    (float(row[by_normalized[lat_col]]), float(row[by_normalized[lng_col]]))
                )
            except (TypeError, ValueError):
                logger.warning("skip_row line=%d reason=bad_coordinates", line_no)
                continue
            # NaN for inf/overflowing cells, so they never match
            if haversine_distance_km(center, point) <= max_km:
                writer.writerow(row)
                matched += 1

    logger.info("filter_nearby rows=%d matched=%d max_km=%s", total, matched, max_km)
    return 0


if __name__ == "__main__":
    sys.exit(main())
