# Copyright 2025 The monty-hall-sim Authors
#
# Use of this source code is governed by an MIT license:
# see the LICENSE file at the root of this repository

__version__ = "0.1.0"
