# load_data.py
"""
Load the cooperative's rate chart CSV into the database.

Usage:
    python load_data.py
"""

from scripts.ingest import parse_rate_chart_csv, load_into_db, FILE_PATH


def main():
    bands, stats = parse_rate_chart_csv(FILE_PATH)
    load_into_db(bands)

    print("Load complete.")
    print(f"Total CSV rows read:   {stats['n_rows']}")
    print(f"Rate bands loaded:     {stats['n_bands']}")
    print(f"Rows with errors:      {stats['n_errors']}")


if __name__ == "__main__":
    main()
