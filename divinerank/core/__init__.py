# Copyright 2026 DivineRank
# SPDX-License-Identifier: MIT
"""Core services: configuration, calendar utilities, observability."""
