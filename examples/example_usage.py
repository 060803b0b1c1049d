"""Example: call the summary service directly (no Flask).

Controllers are a thin layer; the aggregation lives in the services.
Usage: python examples/example_usage.py [month] [year]
"""

import importlib
import json
import sys

from config import get_settings_module

from src.hr_attendance.hr_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)
    month = sys.argv[1] if len(sys.argv) > 1 else None
    year = sys.argv[2] if len(sys.argv) > 2 else None
    summaries = container.attendance_service.summarize_month(month, year)
    print(json.dumps([s.to_dict() for s in summaries], indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
