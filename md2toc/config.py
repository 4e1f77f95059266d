from __future__ import annotations

import os

LOG_LEVEL = os.getenv("MD2TOC_LOG_LEVEL", "WARNING").upper()
ENCODING = os.getenv("MD2TOC_ENCODING", "utf-8")
