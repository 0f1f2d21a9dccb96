# load_sample_data.py
"""
Run: python load_sample_data.py [--items users,events]
Resets the sample collections and reloads them from sample_data/*.json.
"""
import sys

from Seeder.main import main

if __name__ == "__main__":
    sys.exit(main())
