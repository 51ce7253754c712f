#!/usr/bin/env python3
"""Exit 0 when station_conquest can be imported, 1 otherwise."""

import importlib.util
import sys

sys.exit(0 if importlib.util.find_spec("station_conquest") is not None else 1)
