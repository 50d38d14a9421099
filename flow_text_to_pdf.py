#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Flow plain text files into wrapped, paginated PDF pages.
"""

# local repo modules
import pdf_text_flow as ptf
import pdf_text_flow.cli


if __name__ == "__main__":
	ptf.cli.main()
