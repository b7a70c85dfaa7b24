#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
FlatVFS 核心模块

提供二进制 I/O 封装和数据结构定义。
"""

from .binary_io import BinaryReader
from .schema import Entry

__all__ = [
    "BinaryReader",
    "Entry",
]
