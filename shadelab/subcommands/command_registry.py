#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/subcommands/command_registry.py

from . import (
    edit,
    shades,
    favorites,
)

SUBCOMMANDS = {
    'edit': edit,
    'shades': shades,
    'favorites': favorites,
}
