# =============================================================================
# File: __main__.py
# Date: 2026-10-12
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import sys

from copywriter.main import main

sys.exit(main())
