#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: composition/__main__.py

from composition.main import main

main()
