from __future__ import annotations

import sys

from weather_report import main as main_module

if __name__ == "__main__":
    sys.exit(main_module.main())
