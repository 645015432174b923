# Prefix Launcher — Rofi Prefix Command Launcher
# Copyright (c) 2025
# TriFactoria (Andrew Blankfield)
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
Prefix Launcher core package.

A rofi menu of short prefixes mapped to shell command templates.
"""
from .launcher import Launcher as Launcher  # noqa: F401 (re-export)
