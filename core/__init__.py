# This file makes the 'core' directory a Python package.
