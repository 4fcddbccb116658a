# This file makes the scripts directory a Python package
