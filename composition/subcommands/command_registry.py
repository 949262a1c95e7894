#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/subcommands/command_registry.py

from . import (
    convert,
    frame,
)

SUBCOMMANDS = {
    'convert': convert,
    'frame': frame,
}
