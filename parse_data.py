# parse_data.py
"""
Parse the rate chart CSV and print basic stats without touching the database.
"""

from scripts.ingest import parse_rate_chart_csv, FILE_PATH


def main():
    bands, stats = parse_rate_chart_csv(FILE_PATH)

    print(f"Total CSV rows read:   {stats['n_rows']}")
    print(f"Rate bands parsed:     {stats['n_bands']}")
    print(f"Rows with errors:      {stats['n_errors']}")
    for milk_type, count in stats["bands_by_type"].items():
        print(f"  {milk_type:<8} {count}")

    if stats["error_examples"]:
        print("\nExample errors:")
        for ex in stats["error_examples"]:
            print(f"- Row {ex['row_number']}: {ex['error']}")


if __name__ == "__main__":
    main()
