#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Lay out photos as a 12-up sheet or an 8-panel mini-zine PDF.
"""

import sys

import storysheet_imposer.cli


if __name__ == "__main__":
	sys.exit(storysheet_imposer.cli.main())
