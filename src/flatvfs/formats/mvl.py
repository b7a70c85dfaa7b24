#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Descent II Movielib (.mvl)

前 4 字节为 "DMVL"，随后 4 字节为文件数量；
每个文件一条 17 字节记录: 13 字节文件名 (NUL 填充) + 4 字节大小。
文件名不区分大小写。
"""

from .base import FormatDescriptor, NameComparison, NamePadding


MVL = FormatDescriptor(
    name="MVL",
    signature=b"DMVL",
    name_field_width=13,
    name_padding=NamePadding.NUL,
    name_comparison=NameComparison.CASE_INSENSITIVE,
    extension="mvl",
    description="Descent II Movielib format",
)
