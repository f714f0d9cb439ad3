#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: shadelab/__main__.py

from shadelab.main import main

main()
